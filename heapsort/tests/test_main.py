import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from ..main import main


def run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class MainTests(unittest.TestCase):
    def test_sort(self):
        self.assertEqual(run(["5,3,8,1"]), (0, "1,3,5,8\n", ""))

    def test_descending(self):
        self.assertEqual(run(["5,3,8,1", "--descending"]), (0, "8,5,3,1\n", ""))

    def test_separator(self):
        self.assertEqual(run(["2.5;1", "--separator", ";"]), (0, "1;2.5\n", ""))

    def test_empty(self):
        self.assertEqual(run([]), (0, "\n", ""))

    def test_invalid(self):
        self.assertEqual(run(["1,two,3"]), (1, "", "two is not a number\n"))

    def test_nan_rejected(self):
        self.assertEqual(run(["3,nan,1"]), (1, "", "nan is not a number\n"))

    def test_trailing_separator(self):
        self.assertEqual(run(["3,1,"]), (0, "1,3\n", ""))


if __name__ == "__main__":
    unittest.main()
