from __future__ import annotations

import importlib.util
import operator
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


def is_even(x) -> bool:
    return x % 2 == 0


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for headtail imports")
class FoldEquivalenceTests(unittest.TestCase):
    SAMPLES = [
        [],
        [7],
        [1, 2, 3, 4],
        [5, 3, 8, 3, 0, -2],
        list(range(120)),
    ]

    def test_reduce_examples(self) -> None:
        from headtail import reduce

        self.assertEqual(reduce([1, 2, 3], lambda memo, x: memo + x, 0), 6)
        self.assertEqual(reduce([4, 5, 6], lambda memo, x: [*memo, x], [1, 2, 3]), [1, 2, 3, 4, 5, 6])
        self.assertEqual(reduce([], operator.add, "seed"), "seed")

    def test_reduce_passes_index_to_three_argument_folds(self) -> None:
        from headtail import reduce

        seen = reduce(["a", "b", "c"], lambda memo, x, i: [*memo, (i, x)], [])
        self.assertEqual(seen, [(0, "a"), (1, "b"), (2, "c")])

    def test_reduce_is_left_to_right(self) -> None:
        from headtail import reduce

        self.assertEqual(reduce([1, 2, 3], lambda memo, x: f"({memo}{x})", ""), "(((1)2)3)")

    def test_reduce_does_not_grow_the_stack(self) -> None:
        from headtail import reduce

        self.assertEqual(reduce(range(50_000), operator.add, 0), sum(range(50_000)))

    def test_reduce_right(self) -> None:
        from headtail import reduce_right

        out = reduce_right([[0, 1], [2, 3], [4, 5]], lambda memo, x: [*memo, *x], [])
        self.assertEqual(out, [4, 5, 2, 3, 0, 1])
        self.assertEqual(reduce_right([1, 2, 3], lambda memo, x: f"({memo}{x})", ""), "(((3)2)1)")

    def test_fold_formulations_match_direct_recursion(self) -> None:
        from headtail import (
            filter,
            filter_fold,
            first,
            first_fold,
            last,
            last_fold,
            length,
            length_fold,
            map,
            map_fold,
            reject,
            reject_fold,
            reverse,
            reverse_fold,
        )

        double = lambda x: x * 2  # noqa: E731
        for sample in self.SAMPLES:
            with self.subTest(size=len(sample)):
                self.assertEqual(reverse_fold(sample), reverse(sample))
                self.assertEqual(length_fold(sample), length(sample))
                self.assertEqual(map_fold(sample, double), map(sample, double))
                self.assertEqual(filter_fold(sample, is_even), filter(sample, is_even))
                self.assertEqual(reject_fold(sample, is_even), reject(sample, is_even))
                for n in (0, 1, 3, 200):
                    self.assertEqual(first_fold(sample, n), first(sample, n))
                    self.assertEqual(last_fold(sample, n), last(sample, n))

    def test_flatten_fold_matches_flatten(self) -> None:
        from headtail import flatten, flatten_fold

        cases = [
            [[1, 2, 3], [4, [5, [6]]]],
            [1, [2, 3, [4, [5, [[6]]]]]],
            [0, [0, [None]], False],
            [],
        ]
        for seq in cases:
            with self.subTest(seq=seq):
                self.assertEqual(flatten_fold(seq), flatten(seq))

    def test_map_fold_supplies_index_when_requested(self) -> None:
        from headtail import filter_fold, map_fold

        self.assertEqual(map_fold(["a", "b"], lambda x, i: f"{i}{x}"), ["0a", "1b"])
        self.assertEqual(filter_fold([9, 9, 9, 9], lambda _x, i: i % 2 == 0), [9, 9])

    def test_merge(self) -> None:
        from headtail import merge

        self.assertEqual(merge([1, 2, 3], [4, 5, 6]), [1, 2, 3, 4, 5, 6])
        self.assertEqual(merge([1], (2,), [], [[3]]), [1, 2, [3]])
        self.assertEqual(merge(), [])

    def test_arithmetic_folds(self) -> None:
        from headtail import add, divide, multiply

        self.assertEqual(add(1, 2, 3, 4, 5), 15)
        self.assertEqual(multiply(2, 5, 10), 100)
        self.assertEqual(divide(100, 2, 5), 10)
        self.assertEqual(add(7), 7)
        self.assertEqual(add("a", "b"), "ab")

    def test_arithmetic_folds_with_no_arguments_fail(self) -> None:
        from headtail import EmptySequenceError, add, divide, multiply

        for fn in (add, multiply, divide):
            with self.subTest(fn=fn.__name__):
                with self.assertRaises(EmptySequenceError):
                    fn()

    def test_divide_by_zero_is_a_domain_error(self) -> None:
        from headtail import DivisionByZeroError, DomainError, divide

        with self.assertRaises(DivisionByZeroError):
            divide(1, 0)
        with self.assertRaisesRegex(DivisionByZeroError, "^divide: "):
            divide(5, 1, 0)
        with self.assertRaises(DomainError):
            divide(10, 2, 0.0)
        with self.assertRaises(ZeroDivisionError):
            divide(10, 0)


if __name__ == "__main__":
    unittest.main()
