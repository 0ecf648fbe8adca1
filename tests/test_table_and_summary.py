import math
import unittest

import numpy as np
import pandas as pd

from amber_LisReporter.core.summary import compute_stats, format_stats, reorder_and_sort
from amber_LisReporter.core.table import concatenate, to_table


class TableBuilderTests(unittest.TestCase):
    def test_to_table_columns_follow_mapping(self):
        df = to_table({"PRESS": [1.0, 2.0], "TEMP(K)": [300.0, 301.0]})
        self.assertEqual(["PRESS", "TEMP(K)"], list(df.columns))
        self.assertEqual((2, 2), df.shape)
        self.assertTrue(all(dt == np.float64 for dt in df.dtypes))

    def test_ragged_series_are_padded(self):
        df = to_table({"A": [1.0, 2.0, 3.0], "B": [4.0]})
        self.assertEqual([1.0, 2.0, 3.0], df["A"].tolist())
        self.assertEqual(4.0, df["B"].iloc[0])
        self.assertTrue(df["B"].iloc[1:].isna().all())

    def test_empty_mapping_gives_empty_table(self):
        self.assertTrue(to_table({}).empty)

    def test_first_concatenation_uses_next_as_base(self):
        nxt = to_table({"A": [1.0]})
        out = concatenate(None, nxt)
        pd.testing.assert_frame_equal(nxt, out)

    def test_empty_next_keeps_accumulated(self):
        acc = to_table({"A": [1.0, 2.0]})
        pd.testing.assert_frame_equal(acc, concatenate(acc, pd.DataFrame()))

    def test_rows_stack_in_file_order(self):
        a = to_table({"T": [3.0, 1.0]})
        b = to_table({"T": [2.0]})
        self.assertEqual([3.0, 1.0, 2.0], concatenate(a, b)["T"].tolist())
        self.assertEqual([0, 1, 2], list(concatenate(a, b).index))

    def test_disjoint_fields_are_nan_filled(self):
        a = to_table({"PRESS": [1.0, 2.0]})
        b = to_table({"TEMP(K)": [300.0]})
        out = concatenate(a, b)
        self.assertEqual(["PRESS", "TEMP(K)"], list(out.columns))
        self.assertEqual(3, len(out))
        self.assertEqual([1.0, 2.0], out["PRESS"].iloc[:2].tolist())
        self.assertTrue(math.isnan(out["PRESS"].iloc[2]))
        self.assertTrue(out["TEMP(K)"].iloc[:2].isna().all())
        self.assertEqual(300.0, out["TEMP(K)"].iloc[2])

    def test_column_order_does_not_depend_on_file_order(self):
        a = to_table({"B": [1.0]})
        b = to_table({"A": [2.0]})
        self.assertEqual(["A", "B"], list(concatenate(a, b).columns))
        self.assertEqual(["A", "B"], list(concatenate(b, a).columns))


class SummaryTests(unittest.TestCase):
    def test_time_column_moves_first_and_rows_sort(self):
        df = pd.DataFrame({"PRESS": [3.0, 1.0, 2.0], "TEMP(K)": [30.0, 10.0, 20.0],
                           "TIME(PS)": [3.0, 1.0, 2.0]})
        out = reorder_and_sort(df)
        self.assertEqual(["TIME(PS)", "PRESS", "TEMP(K)"], list(out.columns))
        self.assertEqual([1.0, 2.0, 3.0], out["TIME(PS)"].tolist())
        self.assertEqual([10.0, 20.0, 30.0], out["TEMP(K)"].tolist())

    def test_sort_is_stable_on_ties(self):
        df = pd.DataFrame({"A": [1.0, 2.0, 3.0], "TIME(PS)": [5.0, 1.0, 5.0]})
        out = reorder_and_sort(df)
        self.assertEqual([2.0, 1.0, 3.0], out["A"].tolist())

    def test_missing_time_rows_go_last(self):
        df = pd.DataFrame({"A": [1.0, 2.0, 3.0, 4.0], "TIME(PS)": [np.nan, 2.0, np.nan, 1.0]})
        out = reorder_and_sort(df)
        self.assertEqual([4.0, 2.0, 1.0, 3.0], out["A"].tolist())

    def test_without_time_column_table_is_untouched(self):
        df = pd.DataFrame({"B": [2.0, 1.0], "A": [1.0, 2.0]})
        pd.testing.assert_frame_equal(df, reorder_and_sort(df))

    def test_stats_use_sample_std_and_skip_nan(self):
        df = pd.DataFrame({"A": [1.0, 2.0, 3.0, np.nan], "B": [5.0, np.nan, np.nan, np.nan]})
        stats = compute_stats(df)
        self.assertAlmostEqual(2.0, stats["A"][0])
        self.assertAlmostEqual(1.0, stats["A"][1])
        self.assertEqual(5.0, stats["B"][0])
        self.assertTrue(math.isnan(stats["B"][1]))

    def test_format_block(self):
        text = format_stats({"TEMP(K)": (300.0, 1.5)})
        self.assertEqual("          TEMP(K)\n\nMean=     300.0\nStd=      1.5\n" + "-" * 30, text)


if __name__ == "__main__":
    unittest.main()
