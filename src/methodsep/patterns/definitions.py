"""C++ function definition line detection.

A single trimmed line is judged by surface lexical heuristics only. This is
not a parser: signatures spanning several lines are never detected, and a
control statement such as ``} while (x)`` ending in ``)`` with two tokens
before its parenthesis is accepted as a definition.
"""

# Lines starting with these are never definitions
# (line comment, preprocessor directive, chained conditional)
_EXCLUDED_PREFIXES: tuple[str, ...] = ("//", "#", "else if")

# A definition line ends with its body brace, its closing parenthesis,
# or a trailing specifier
_DEFINITION_ENDINGS: tuple[str, ...] = (
    "{",
    ")",
    "noexcept",
    "const",
    "final",
    "override",
)

# Qualified names (Class::method) count as a definition even without a
# return type in front of them
_SCOPE_OPERATOR = "::"


def is_function_definition_line(line: str) -> bool:
    """Check if a line looks like the start of a C++ function definition.

    All of the following must hold:
    1. The line is non-empty
    2. It does not start with ``//``, ``#`` or ``else if``
    3. It contains both ``(`` and ``)``
    4. It contains no ``;`` (declarations, prototypes, statements)
    5. It ends with ``{``, ``)``, ``noexcept``, ``const``, ``final`` or ``override``
    6. The text before the first ``(`` holds at least two space-separated
       tokens (return type and name), or contains ``::``

    Examples of definitions:
        void DoThing() {
        MyClass::DoThing() const
        int Compute(int x)
        static bool Parse(const char* s) noexcept

    Examples of non-definitions:
        DoThing() {           (single token, unqualified)
        if (x)                (single token)
        else if (x > 0) {
        void DoThing();
        // void DoThing() {

    Args:
        line: A single line of source text, already trimmed by the caller.

    Returns:
        True if the line is judged to start a function definition.
    """
    if not line:
        return False

    if line.startswith(_EXCLUDED_PREFIXES):
        return False

    if "(" not in line or ")" not in line:
        return False

    if ";" in line:
        return False

    if not line.endswith(_DEFINITION_ENDINGS):
        return False

    # Split on single spaces only; tabs stay inside tokens
    prefix = line[: line.index("(")].strip()
    tokens = [token for token in prefix.split(" ") if token]
    return len(tokens) >= 2 or _SCOPE_OPERATOR in prefix
