"""
Command-line entry point: standardize one expression and print the result.
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from standard_form.errors import InvalidExpression, RewriteLimitExceeded
from standard_form.rewrite.config import RewriteConfig
from standard_form.runlog.trace import RunLog
from standard_form.standardizer import Standardizer


def main(argv: Optional[List[str]] = None) -> int:
	"""
	Print the standard form of the single positional expression.

	An expression with a leading sign ("-YX") is accepted without "--".

	Returns 0 on success, 2 when the input cannot be parsed or the step budget runs out.
	"""
	p = argparse.ArgumentParser(description="Reduce an X/Y/Z expression to standard form")
	p.add_argument("expression", type=str, nargs="?")
	p.add_argument("--trace", type=str, default="", help="write the rewrite trace as JSONL to this path")
	p.add_argument("--max-steps", type=int, default=RewriteConfig.max_steps)
	args, extra = p.parse_known_args(argv)
	if args.expression is None and len(extra) == 1 and extra[0].startswith("-"):
		args.expression = extra[0]
	elif extra:
		p.error(f"unrecognized arguments: {' '.join(extra)}")
	if args.expression is None:
		p.error("the following arguments are required: expression")

	cfg = RewriteConfig(max_steps=int(args.max_steps), trace=bool(args.trace))
	std = Standardizer(config=cfg)
	try:
		out = std.standardize(args.expression)
	except InvalidExpression as e:
		print(f"parse_error: {e}", file=sys.stderr)
		return 2
	except RewriteLimitExceeded as e:
		print(f"rewrite_error: {e}", file=sys.stderr)
		return 2
	if args.trace:
		RunLog.write_jsonl(Path(args.trace), std.state.log)
	print(out)
	return 0


if __name__ == "__main__":
	sys.exit(main())
