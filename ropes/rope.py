import operator
import reprlib


__all__ = ('Rope', 'Leaf', 'Node', 'IndexOutOfRange')


#
# Immutable binary tree representation of a string.
#
# A rope is either a Leaf, which owns a literal string, or a Node,
# which represents the concatenation of its left and right subtrees.
# Every rope caches its length (number of characters spanned) and its
# height (longest root-to-leaf edge count, 0 for a leaf) at
# construction time; nothing is ever recomputed or mutated afterwards.
#
# Trees built by repeated concatenation can degrade into a linked
# list, making char_at() linear.  balance() flattens the leaves and
# rebuilds a tree of height ceil(log2(leaf count)) over them.
#
# char_at() and leaves() are loops (leaves() over an explicit stack) so
# that arbitrarily skewed trees never hit the interpreter's recursion
# limit.  The only recursive walk is the balanced rebuild, whose depth
# is logarithmic in the number of leaves.
#


class IndexOutOfRange(IndexError):
    pass


# Rope.__setattr__ refuses every write; constructors go around it.
_init = object.__setattr__


class Rope:

    __slots__ = ('_length', '_height', '__weakref__')

    def __init__(self):
        raise TypeError(
            'Rope cannot be instantiated directly, use Leaf or Node')

    def __setattr__(self, name, value):
        raise AttributeError(
            'cannot set {!r} on an immutable rope'.format(name))

    def __delattr__(self, name):
        raise AttributeError(
            'cannot delete {!r} from an immutable rope'.format(name))

    @property
    def length(self):
        return self._length

    @property
    def height(self):
        return self._height

    @property
    def left(self):
        return None

    @property
    def right(self):
        return None

    @property
    def string(self):
        return None

    def is_leaf(self):
        return False

    def __len__(self):
        return self._length

    def char_at(self, index):
        index = _check_index(self, index)

        node = self
        while not node.is_leaf():
            left = node._left
            if index < left._length:
                node = left
            else:
                index -= left._length
                node = node._right

        return node._string[index]

    def __getitem__(self, index):
        return self.char_at(index)

    def leaves(self):
        out = []
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                out.append(node)
            else:
                # The right child goes in first so that the left one
                # is popped first and leaves come out in order.
                stack.append(node._right)
                stack.append(node._left)
        return out

    def balance(self):
        leaves = self.leaves()
        return _build_balanced(leaves, 0, len(leaves))

    def is_balanced(self):
        return self._height == _min_height(len(self.leaves()))

    def __str__(self):
        return ''.join(leaf._string for leaf in self.leaves())

    def __dump__(self):  # pragma: no cover
        buf = []
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            pad = '    ' * level
            if node.is_leaf():
                buf.append('{}Leaf(length={} id={:0x}): {!r}'.format(
                    pad, node._length, id(node), node._string))
            else:
                buf.append('{}Node(length={} height={} id={:0x}):'.format(
                    pad, node._length, node._height, id(node)))
                stack.append((node._right, level + 1))
                stack.append((node._left, level + 1))
        return '\n'.join(buf)


class Leaf(Rope):

    __slots__ = ('_string',)

    def __init__(self, string):
        if not isinstance(string, str):
            raise TypeError(
                'Leaf expects a str, got {}'.format(type(string).__name__))

        _init(self, '_string', string)
        _init(self, '_length', len(string))
        _init(self, '_height', 0)

    @property
    def string(self):
        return self._string

    def is_leaf(self):
        return True

    def char_at(self, index):
        return self._string[_check_index(self, index)]

    def leaves(self):
        return [self]

    def balance(self):
        return self

    def is_balanced(self):
        return True

    def __str__(self):
        return self._string

    def __repr__(self):
        return '<ropes.Leaf({}) at 0x{:0x}>'.format(
            reprlib.repr(self._string), id(self))


class Node(Rope):

    __slots__ = ('_left', '_right')

    def __init__(self, left, right):
        if not isinstance(left, Rope) or not isinstance(right, Rope):
            raise TypeError(
                'Node expects two ropes, got {} and {}'.format(
                    type(left).__name__, type(right).__name__))

        _init(self, '_left', left)
        _init(self, '_right', right)
        _init(self, '_length', left._length + right._length)
        _init(self, '_height', 1 + max(left._height, right._height))

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    def __repr__(self):
        return '<ropes.Node(length={} height={}) at 0x{:0x}>'.format(
            self._length, self._height, id(self))


def _check_index(rope, index):
    index = operator.index(index)
    if index < 0 or index >= rope._length:
        raise IndexOutOfRange(
            'rope index {} out of range for length {}'.format(
                index, rope._length))
    return index


def _min_height(count):
    # ceil(log2(count)) for count >= 1, computed on integers.
    return (count - 1).bit_length()


def _build_balanced(leaves, start, stop):
    size = stop - start
    if size == 1:
        return leaves[start]

    mid = start + size // 2
    return Node(
        _build_balanced(leaves, start, mid),
        _build_balanced(leaves, mid, stop),
    )
