"""Tests for the SeparatorScanner component."""

from methodsep import Normalizer, SeparatorScanner
from methodsep.pipeline.scanner import ScanResult

SOURCE = "\n".join(
    [
        "#include <vector>",  # 0
        "",  # 1
        "void A() {",  # 2
        "}",  # 3
        "",  # 4
        "  int B(int x)  ",  # 5
        "{",  # 6
        "}",  # 7
    ]
)


def _scan(text: str, start: int = 0, end: int | None = None) -> ScanResult:
    """Helper to normalize and scan text."""
    return SeparatorScanner().scan(Normalizer().normalize(text), start, end)


class TestFullScan:
    """Scanning a whole buffer."""

    def test_marks_definitions(self) -> None:
        """Each definition line gets a mark."""
        result = _scan(SOURCE)

        assert result.line_indexes == (2, 5)

    def test_mark_text_is_trimmed(self) -> None:
        """Marks carry the trimmed text that was classified."""
        result = _scan(SOURCE)

        assert result.marks[1].text == "int B(int x)"

    def test_every_lookahead_line_inspected(self) -> None:
        """All lines but the first are passed to the classifier once."""
        result = _scan(SOURCE)

        assert result.lines_inspected == 7
        assert (result.start, result.end) == (0, 7)

    def test_no_definitions(self) -> None:
        """Plain statements yield no marks."""
        result = _scan("int a = 0;\nint b = 1;\nreturn a + b;")

        assert result.marks == ()

    def test_empty_buffer(self) -> None:
        """An empty buffer has nothing to inspect."""
        result = _scan("")

        assert result.marks == ()
        assert result.lines_inspected == 0


class TestBufferStart:
    """No separator is drawn at the very top of the buffer."""

    def test_definition_on_first_line(self) -> None:
        """Line 0 is never a lookahead target."""
        result = _scan("void A() {\n}")

        assert result.marks == ()

    def test_definition_on_second_line(self) -> None:
        """Line 1 is classified but not marked."""
        result = _scan("// header\nvoid A() {\n}")

        assert result.marks == ()
        assert result.lines_inspected == 2

    def test_definition_on_third_line(self) -> None:
        """Line 2 is the first line that can receive a separator."""
        result = _scan("// header\n\nvoid A() {\n}")

        assert result.line_indexes == (2,)


class TestRange:
    """Scanning part of a buffer."""

    def test_partial_range(self) -> None:
        """Only lines after the range's members are classified."""
        result = _scan(SOURCE, start=3, end=4)

        assert result.line_indexes == (5,)
        assert result.lines_inspected == 2

    def test_end_clamped(self) -> None:
        """An end past the buffer is clamped to the last line."""
        result = _scan(SOURCE, start=0, end=100)

        assert result.end == 7
        assert result.line_indexes == (2, 5)

    def test_negative_start_clamped(self) -> None:
        """A negative start is clamped to zero."""
        result = _scan(SOURCE, start=-5, end=2)

        assert result.start == 0
        assert result.line_indexes == (2,)

    def test_inverted_range(self) -> None:
        """An inverted range inspects nothing."""
        result = _scan(SOURCE, start=5, end=2)

        assert result.marks == ()
        assert result.lines_inspected == 0


class TestInjectedClassifier:
    """The decision function can be replaced."""

    def test_custom_classifier(self) -> None:
        """A custom classifier sees trimmed lines and drives the marks."""
        seen: list[str] = []

        def classifier(line: str) -> bool:
            seen.append(line)
            return line.startswith("fn ")

        scanner = SeparatorScanner(classifier)
        result = scanner.scan(Normalizer().normalize("x\ny\n  fn main() {\n}"))

        assert result.line_indexes == (2,)
        assert seen == ["y", "fn main() {", "}"]
