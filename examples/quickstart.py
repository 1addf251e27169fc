"""Quickstart example for greedyerror.

Runs one grammar over one input with both merge policies and prints what
each reports:

    VerboseError failed at      GreedyError failed at
      abc012:::                   abc012:::
      ^                                 ^
"""

from greedyerror import GreedyError, ParseFailedError, VerboseError, deepest_position, parse
from greedyerror.diagnostics import DiagnosticFormatter, OutputFormat
from greedyerror.parser import alpha1, alt, context, digit1, parse_partial, sequence

grammar = alt(
    context("word-number-word", sequence(alpha1, digit1, alpha1)),
    context("number-word-number", sequence(digit1, alpha1, digit1)),
)

source = "abc012:::"

# Example 1: Last-wins policy
print("=" * 50)
print("Example 1: VerboseError (last alternative)")
print("=" * 50)

verbose = parse_partial(grammar, source, error_type=VerboseError)
print(f"deepest position: {deepest_position(verbose)}")
# Output: deepest position: 0

# Example 2: Greedy policy
print("\n" + "=" * 50)
print("Example 2: GreedyError (deepest alternative)")
print("=" * 50)

greedy = parse_partial(grammar, source, error_type=GreedyError)
print(f"deepest position: {deepest_position(greedy)}")
# Output: deepest position: 6

# Example 3: Full trace through the exception
print("\n" + "=" * 50)
print("Example 3: Rendered trace")
print("=" * 50)

try:
    parse(grammar, source)
except ParseFailedError as e:
    print(e)
    print(e.format_trace())

# Example 4: Condensed formats
print("=" * 50)
print("Example 4: SIMPLE and JSON output")
print("=" * 50)

for output_format in (OutputFormat.SIMPLE, OutputFormat.JSON):
    print(DiagnosticFormatter(output_format=output_format).format(source, greedy))
