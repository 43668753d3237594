"""headtail public API."""

from .combinators import compose, flow, partial, pluck, reverse_args, spread_arg
from .errors import (
    DivisionByZeroError,
    DomainError,
    EmptySequenceError,
    HeadTailError,
    IndexOutOfRangeError,
    RecursionDepthError,
    SequenceTypeError,
)
from .folds import (
    add,
    divide,
    filter_fold,
    first_fold,
    flatten_fold,
    last_fold,
    length_fold,
    map_fold,
    merge,
    multiply,
    reduce,
    reduce_right,
    reject_fold,
    reverse_fold,
)
from .numeric import factorial, fib, fib_memo, max, min, quicksort, quicksort_partition
from .primitives import copy, head, is_defined, is_empty, is_undefined, length, length_acc, reverse, tail
from .recursive import filter, first, flatten, is_sequence, last, map, partition, reject, slice, swap
from .trampoline import Bounce, bounce, trampoline
from .values import UNDEFINED, SeqView

__all__ = [
    "head",
    "tail",
    "is_empty",
    "is_defined",
    "is_undefined",
    "UNDEFINED",
    "copy",
    "length",
    "length_acc",
    "reverse",
    "first",
    "last",
    "slice",
    "swap",
    "flatten",
    "is_sequence",
    "map",
    "filter",
    "reject",
    "partition",
    "reduce",
    "reduce_right",
    "reverse_fold",
    "length_fold",
    "map_fold",
    "filter_fold",
    "reject_fold",
    "first_fold",
    "last_fold",
    "flatten_fold",
    "merge",
    "add",
    "multiply",
    "divide",
    "min",
    "max",
    "factorial",
    "fib",
    "fib_memo",
    "quicksort",
    "quicksort_partition",
    "partial",
    "spread_arg",
    "reverse_args",
    "flow",
    "compose",
    "pluck",
    "Bounce",
    "bounce",
    "trampoline",
    "SeqView",
    "HeadTailError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "SequenceTypeError",
    "RecursionDepthError",
    "DomainError",
    "DivisionByZeroError",
]
