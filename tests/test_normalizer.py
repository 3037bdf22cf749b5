"""Tests for the Normalizer component."""

from methodsep import Normalizer


class TestLineEndings:
    """Line ending normalization tests."""

    def test_crlf_to_lf(self) -> None:
        """CRLF line endings are converted to LF."""
        result = Normalizer().normalize("int a;\r\nint b;\r\n")

        assert result.lines == ("int a;", "int b;", "")
        assert "\r" not in result.text

    def test_cr_to_lf(self) -> None:
        """Bare CR line endings are converted to LF."""
        result = Normalizer().normalize("int a;\rint b;")

        assert result.lines == ("int a;", "int b;")

    def test_mixed_line_endings(self) -> None:
        """Mixed endings all become LF."""
        result = Normalizer().normalize("a\r\nb\rc\nd")

        assert result.lines == ("a", "b", "c", "d")
        assert result.text == "a\nb\nc\nd"

    def test_indentation_preserved(self) -> None:
        """Leading and trailing whitespace is left in place."""
        result = Normalizer().normalize("    void f() {  \n\t}")

        assert result.lines == ("    void f() {  ", "\t}")


class TestByteOrderMark:
    """Byte-order mark removal tests."""

    def test_bom_stripped(self) -> None:
        """A leading BOM is removed and reported."""
        result = Normalizer().normalize("\ufeffvoid f() {")

        assert result.lines[0] == "void f() {"
        assert result.bom_stripped is True

    def test_no_bom(self) -> None:
        """Text without a BOM is reported as such."""
        result = Normalizer().normalize("void f() {")

        assert result.bom_stripped is False

    def test_bom_kept_when_disabled(self) -> None:
        """strip_bom=False leaves the BOM in the first line."""
        result = Normalizer(strip_bom=False).normalize("\ufeffx")

        assert result.lines[0] == "\ufeffx"
        assert result.bom_stripped is False


class TestEmptyInput:
    """Empty buffers still have one line."""

    def test_empty_string(self) -> None:
        """An empty buffer normalizes to one empty line."""
        result = Normalizer().normalize("")

        assert result.lines == ("",)
        assert result.line_count == 1
