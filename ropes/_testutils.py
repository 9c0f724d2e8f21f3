from .rope import Leaf
from .rope import Node


def left_chain(strings):
    """Build a left-skewed rope: (((s0 s1) s2) s3) ..."""
    it = iter(strings)
    rope = Leaf(next(it))
    for s in it:
        rope = Node(rope, Leaf(s))
    return rope


def right_chain(strings):
    """Build a right-skewed rope: s0 (s1 (s2 (s3 ...)))"""
    strings = list(strings)
    rope = Leaf(strings.pop())
    while strings:
        rope = Node(Leaf(strings.pop()), rope)
    return rope


def random_rope(rng, strings):
    """Build a rope of random shape over `strings`, in order.

    Adjacent ropes are joined pairwise at random positions until a
    single tree is left, which yields anything from perfectly balanced
    to fully skewed shapes.
    """
    ropes = [Leaf(s) for s in strings]
    while len(ropes) > 1:
        i = rng.randrange(len(ropes) - 1)
        ropes[i:i + 2] = [Node(ropes[i], ropes[i + 1])]
    return ropes[0]


def random_chunks(rng, text, max_chunk=5):
    """Split `text` into consecutive chunks, empty ones included."""
    chunks = []
    pos = 0
    while pos < len(text):
        size = rng.randint(0, max_chunk)
        chunks.append(text[pos:pos + size])
        pos += size
    if not chunks:
        chunks.append('')
    return chunks
