"""Core analysis modules and intermediate representation.

WHY: The core package contains the stable heart of the analyzer: the IR
dataclasses, markup handling, tokenization, frequency counting, general
statistics and report assembly. Every outer layer (CLI, HTTP API)
consumes it the same way, through report.analyze().

HOW: ir.py defines the data structures, markup.py and tokenizer.py turn
segment text into tokens, frequency.py and general.py aggregate, and
report.py renders the final StatisticsReport.

RULES:
- IR dataclasses are the contract; change with care
- Core modules are synchronous and perform no I/O except write_report()
- Nothing in the core raises for empty input or malformed markup
"""
