# flake8: noqa

from .rope import Rope as Rope
from .rope import Leaf as Leaf
from .rope import Node as Node
from .rope import IndexOutOfRange as IndexOutOfRange

from ._version import __version__

__all__ = 'Rope', 'Leaf', 'Node', 'IndexOutOfRange'
