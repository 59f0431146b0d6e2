from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Optional, Callable, Sequence
from core.interfaces import RoundSummary
from stats.metrics import WindowedStat, Best

ALL_KEYS = [
    "step",
    "round/index", "round/score", "round/length", "round/ticks", "round/tick_ms",
    "round/best", "round/score_mean", "round/score_max",
    "round/death_wall", "round/death_self",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unknown keys are dropped, not fatal
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class ConsoleLogger:
    """Prints one `[snake]` line per log call."""
    def __init__(self, prefix: str = "snake", keys: Optional[Sequence[str]] = None):
        self.prefix = prefix
        self.keys = keys

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        keys = self.keys if self.keys is not None else list(scalars.keys())
        parts = []
        for k in keys:
            if k not in scalars:
                continue
            v = scalars[k]
            name = k.split("/", 1)[-1]
            parts.append(f"{name}={v:.1f}" if isinstance(v, float) else f"{name}={v}")
        print(f"[{self.prefix}] step {step:04d}  " + "  ".join(parts))

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


class MultiLogger:
    """Fans every call out to several loggers."""
    def __init__(self, *loggers: Logger):
        self.loggers = list(loggers)

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        for lg in self.loggers:
            lg.log(step, scalars)

    def flush(self) -> None:
        for lg in self.loggers:
            lg.flush()

    def close(self) -> None:
        for lg in self.loggers:
            lg.close()


def make_round_logger(
    *,
    logger: Logger,
    window: int = 10,
    step_getter: Optional[Callable[[], int]] = None,
) -> Callable[[RoundSummary], None]:
    """
    Returns a function(summary: RoundSummary) -> None that:
      - updates best score and windowed score stats
      - logs all round metrics and flushes

    'step_getter' supplies the CSV 'step' column; defaults to the round index.
    """
    win_score = WindowedStat(window)
    best = Best()

    def _on_round_end(summary: RoundSummary) -> None:
        win_score.add(summary.score)
        ws = win_score.summary()
        scalars = {
            "round/index": summary.round_index,
            "round/score": summary.score,
            "round/length": summary.length,
            "round/ticks": summary.ticks,
            "round/tick_ms": summary.tick_ms,
            "round/best": int(best.update(summary.score)),
            "round/score_mean": ws["mean"],
            "round/score_max": int(ws["max"]),
            "round/death_wall": 1 if summary.reason == "wall" else 0,
            "round/death_self": 1 if summary.reason == "self" else 0,
        }
        step = int(step_getter()) if step_getter is not None else summary.round_index
        logger.log(step, scalars)
        logger.flush()

    return _on_round_end
