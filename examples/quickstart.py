"""Quickstart Example - Text Parsing with parsenom.

Demonstrates the core workflow:

1. Run primitive recognizers and inspect outcomes
2. Compose parsers with sequencing and repetition
3. Choose between alternatives and commit with cut()
4. Parse a small key=value config with finish()
5. Render diagnostics for bad input

Python 3.13+.
"""

from __future__ import annotations


def example_1_outcomes() -> None:
    """Run a recognizer and match on its outcome."""
    from parsenom import Matched, Recoverable, run
    from parsenom.primitives.text import digit1

    print("=" * 60)
    print("Example 1: Outcomes")
    print("=" * 60)

    for source in ("8080/tcp", "http"):
        match run(digit1(), source):
            case Matched(remaining=remaining, value=value):
                print(f"{source!r}: matched {value!r}, left {remaining.rest!r}")
            case Recoverable(kind=kind, buffer=buffer):
                print(f"{source!r}: failed with {kind} at offset {buffer.pos}")
    print()


def example_2_composition() -> None:
    """Combine parsers into a list-of-pairs grammar."""
    from parsenom import run
    from parsenom.combinators import map, separated_list1, separated_pair
    from parsenom.primitives.number import integer
    from parsenom.primitives.text import alpha1, char

    print("=" * 60)
    print("Example 2: Composition")
    print("=" * 60)

    entry = separated_pair(alpha1(), char(":"), integer())
    entries = map(separated_list1(char(","), entry), dict)

    outcome = run(entries, "x:1,y:20,z:300")
    print(f"Parsed mapping: {outcome.value}")  # type: ignore[union-attr]
    print()


def example_3_alternatives() -> None:
    """Ordered choice, and cut() to stop backtracking."""
    from parsenom import Fatal, run
    from parsenom.combinators import alt, cut, preceded, value
    from parsenom.primitives.number import integer
    from parsenom.primitives.text import char, tag

    print("=" * 60)
    print("Example 3: Alternatives and cut()")
    print("=" * 60)

    boolean = alt([value(True, tag("true")), value(False, tag("false"))])
    print(f"'false' -> {run(boolean, 'false').value}")  # type: ignore[union-attr]

    # After '#', an integer must follow; other alternatives are not tried.
    reference = alt([preceded(char("#"), cut(integer())), tag("none")])
    outcome = run(reference, "#abc")
    if isinstance(outcome, Fatal):
        print(f"'#abc' -> committed failure {outcome.kind} at offset {outcome.buffer.pos}")
    print()


def _config_parser():
    from parsenom.combinators import (
        delimited,
        many0,
        preceded,
        separated_pair,
        terminated,
    )
    from parsenom.primitives.text import (
        alphanumeric1,
        char,
        multispace0,
        not_line_ending,
        space0,
    )

    key = delimited(space0(), alphanumeric1(), space0())
    raw_value = preceded(space0(), not_line_ending())
    setting = separated_pair(key, char("="), raw_value)
    return preceded(multispace0(), many0(terminated(setting, multispace0())))


def example_4_config() -> None:
    """Parse a whole document with finish()."""
    from parsenom import finish

    print("=" * 60)
    print("Example 4: key=value config")
    print("=" * 60)

    document = """
host = example.org
port = 8080
mode = fast
"""
    settings = dict(finish(_config_parser(), document))
    for key, setting in settings.items():
        print(f"  {key} -> {setting!r}")
    print()


def example_5_diagnostics() -> None:
    """Render a failure as a diagnostic with an input excerpt."""
    from parsenom import ParseFailedError, finish
    from parsenom.combinators import separated_list1
    from parsenom.diagnostics import DiagnosticFormatter
    from parsenom.primitives.number import integer
    from parsenom.primitives.text import char

    print("=" * 60)
    print("Example 5: Diagnostics")
    print("=" * 60)

    source = "10,20,3x,40"
    try:
        finish(separated_list1(char(","), integer()), source)
    except ParseFailedError as error:
        assert error.diagnostic is not None
        print(DiagnosticFormatter().format_with_context(error.diagnostic, source))
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("parsenom Quickstart")
    print()

    example_1_outcomes()
    example_2_composition()
    example_3_alternatives()
    example_4_config()
    example_5_diagnostics()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
