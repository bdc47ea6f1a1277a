from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Dict, Optional, TextIO


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Line logger behind ``Either.debug``.

    Writes to ``stream`` when given, otherwise to whatever ``sys.stderr`` is at
    write time.
    """

    def __init__(self, name: str = "eitherpy", level: str = "DEBUG", json_output: bool = False,
                 context: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 10)
        self.json_output = json_output
        self.context = dict(context or {})
        self.stream = stream

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output,
                             context=ctx, stream=self.stream)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "DEBUG"

    def _log(self, level: str, msg: str, end: str = "\n", **fields: Any) -> None:
        if _LEVELS[level] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        out = self.stream if self.stream is not None else sys.stderr
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=out, end=end)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=out, end=end)

    def debug(self, msg: str, end: str = "\n", **fields: Any) -> None: self._log("DEBUG", msg, end, **fields)
    def info(self, msg: str, end: str = "\n", **fields: Any) -> None: self._log("INFO", msg, end, **fields)
    def warn(self, msg: str, end: str = "\n", **fields: Any) -> None: self._log("WARN", msg, end, **fields)
    def error(self, msg: str, end: str = "\n", **fields: Any) -> None: self._log("ERROR", msg, end, **fields)


_default = ConsoleLogger()


def get_logger() -> ConsoleLogger:
    return _default


def set_logger(logger: ConsoleLogger) -> ConsoleLogger:
    """Install ``logger`` as the process-wide default and return the previous one."""
    global _default
    prev, _default = _default, logger
    return prev


def configure(level: Optional[str] = None, json_output: Optional[bool] = None,
              stream: Optional[TextIO] = None) -> ConsoleLogger:
    if level is not None:
        _default.set_level(level)
    if json_output is not None:
        _default.json_output = json_output
    if stream is not None:
        _default.stream = stream
    return _default
