"""
Canonical JSONL emission for rewrite traces.

Each LogEvent becomes one line {"seq": n, "kind": ..., "payload": ...} with
sorted keys and fixed separators, so two runs over the same input produce
byte-identical files; `seq` is a logical counter, not wall-clock time.
"""

from __future__ import annotations
import json
import hashlib
from pathlib import Path
from typing import Dict, Iterable, List

from standard_form.rewrite.config import LogEvent


class RunLog:
	"""
	Class facade for canonical JSON, JSONL serialization and digests of rewrite events.
	"""

	@staticmethod
	def canonical_json(o: dict) -> str:
		"""
		Return a canonical JSON string with sorted keys and fixed separators.
		"""
		return json.dumps(o, sort_keys=True, ensure_ascii=False, separators=(",", ":"))

	@staticmethod
	def sha256_hex(b: bytes) -> str:
		"""
		Return the hexadecimal SHA-256 digest of a bytes buffer.
		"""
		h = hashlib.sha256()
		h.update(b)
		return h.hexdigest()

	@staticmethod
	def event_records(events: Iterable[LogEvent]) -> List[Dict[str, object]]:
		"""Number events in order and flatten them to plain dicts."""
		out: List[Dict[str, object]] = []
		seq = 0
		for ev in events:
			out.append({"seq": seq, "kind": ev.kind, "payload": ev.payload})
			seq += 1
		return out

	@staticmethod
	def events_to_jsonl(events: Iterable[LogEvent]) -> str:
		"""Return the JSONL body (one canonical line per event, trailing newline)."""
		lines = [RunLog.canonical_json(r) for r in RunLog.event_records(events)]
		if not lines:
			return ""
		return "\n".join(lines) + "\n"

	@staticmethod
	def write_jsonl(path: Path, events: Iterable[LogEvent]) -> str:
		"""
		Write the events to `path` as canonical JSONL and return the SHA-256 of the body.
		"""
		body = RunLog.events_to_jsonl(events)
		p = Path(path)
		p.parent.mkdir(parents=True, exist_ok=True)
		p.write_text(body, encoding="utf-8")
		return RunLog.sha256_hex(body.encode("utf-8"))
