from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for headtail imports")
class ErrorModelTests(unittest.TestCase):
    DEEP = list(range(100_000))

    def test_hierarchy_keeps_builtin_bases(self) -> None:
        from headtail.errors import (
            DivisionByZeroError,
            DomainError,
            EmptySequenceError,
            HeadTailError,
            IndexOutOfRangeError,
            RecursionDepthError,
            SequenceTypeError,
        )

        self.assertTrue(issubclass(EmptySequenceError, LookupError))
        self.assertTrue(issubclass(IndexOutOfRangeError, IndexError))
        self.assertTrue(issubclass(SequenceTypeError, TypeError))
        self.assertTrue(issubclass(RecursionDepthError, RecursionError))
        self.assertTrue(issubclass(DomainError, ArithmeticError))
        self.assertTrue(issubclass(DivisionByZeroError, ZeroDivisionError))
        for cls in (EmptySequenceError, IndexOutOfRangeError, SequenceTypeError, RecursionDepthError, DomainError):
            with self.subTest(cls=cls.__name__):
                self.assertTrue(issubclass(cls, HeadTailError))

    def test_index_error_message_carries_position(self) -> None:
        from headtail.errors import IndexOutOfRangeError

        err = IndexOutOfRangeError(where="swap", index=7, length=3)
        self.assertEqual(str(err), "swap: index 7 out of range for sequence of length 3")

    def test_plain_recursion_overflow_is_structured(self) -> None:
        from headtail import RecursionDepthError, filter, flatten, length, map, reverse

        cases = [
            ("length", lambda: length(self.DEEP)),
            ("reverse", lambda: reverse(self.DEEP)),
            ("map", lambda: map(self.DEEP, abs)),
            ("filter", lambda: filter(self.DEEP, bool)),
            ("flatten", lambda: flatten(self.DEEP)),
        ]
        for name, call in cases:
            with self.subTest(op=name):
                with self.assertRaises(RecursionDepthError) as ctx:
                    call()
                self.assertIsInstance(ctx.exception.__cause__, RecursionError)
                self.assertIn(name, str(ctx.exception))

    def test_accumulator_and_fold_variants_avoid_overflow(self) -> None:
        from headtail import length_acc, length_fold, reduce

        self.assertEqual(length_acc(self.DEEP), len(self.DEEP))
        self.assertEqual(length_fold(self.DEEP), len(self.DEEP))
        self.assertEqual(reduce(self.DEEP, lambda memo, x: memo + x, 0), sum(self.DEEP))

    def test_callback_errors_propagate_unchanged(self) -> None:
        from headtail import filter, map, reduce

        def boom(*_args):
            raise ValueError("boom")

        for call in (lambda: map([1], boom), lambda: filter([1], boom), lambda: reduce([1], boom, 0)):
            with self.assertRaisesRegex(ValueError, "boom"):
                call()

    def test_classify_runtime_exception(self) -> None:
        from headtail.errors import (
            DivisionByZeroError,
            DomainError,
            EmptySequenceError,
            HeadTailError,
            RecursionDepthError,
            SequenceTypeError,
            classify_runtime_exception,
        )

        cases = [
            (RecursionError("maximum recursion depth exceeded"), RecursionDepthError),
            (ZeroDivisionError("division by zero"), DivisionByZeroError),
            (OverflowError("too big"), DomainError),
            (TypeError("unsupported operand"), SequenceTypeError),
            (ValueError("reduce() of empty iterable"), EmptySequenceError),
            (ValueError("something else"), HeadTailError),
        ]
        for err, expected in cases:
            with self.subTest(err=type(err).__name__, message=str(err)):
                classified = classify_runtime_exception(err)
                self.assertIs(type(classified), expected)
                self.assertEqual(str(classified), str(err))

        already = EmptySequenceError("x")
        self.assertIs(classify_runtime_exception(already), already)

    def test_runaway_callback_recursion_is_not_relabelled(self) -> None:
        from headtail import RecursionDepthError, filter, map, reject

        def runaway(x):
            return runaway(x)

        for name, op in (("map", map), ("filter", filter), ("reject", reject)):
            with self.subTest(op=name):
                with self.assertRaises(RecursionError) as ctx:
                    op([1, 2], runaway)
                self.assertNotIsInstance(ctx.exception, RecursionDepthError)

    def test_overflow_message_names_the_operation(self) -> None:
        from headtail import RecursionDepthError, map

        with self.assertRaises(RecursionDepthError) as ctx:
            map(self.DEEP, lambda x: x)
        self.assertTrue(str(ctx.exception).startswith("map: "))

    def test_index_error_pickles_and_accepts_notes(self) -> None:
        import pickle
        import sys

        from headtail.errors import IndexOutOfRangeError

        err = IndexOutOfRangeError(where="slice", index=-1, length=4)
        restored = pickle.loads(pickle.dumps(err))
        self.assertIs(type(restored), IndexOutOfRangeError)
        self.assertEqual((restored.where, restored.index, restored.length), ("slice", -1, 4))
        self.assertEqual(str(restored), str(err))
        if sys.version_info >= (3, 11):
            err.add_note("while inserting")
            self.assertEqual(err.__notes__, ["while inserting"])

    def test_classify_prefixes_operation_name(self) -> None:
        from headtail.errors import DivisionByZeroError, classify_runtime_exception

        classified = classify_runtime_exception(ZeroDivisionError("division by zero"), where="divide")
        self.assertIs(type(classified), DivisionByZeroError)
        self.assertEqual(str(classified), "divide: division by zero")


if __name__ == "__main__":
    unittest.main()
