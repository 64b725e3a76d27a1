"""
Tracing for ratio composition.

    result, trace = compose([r1, r2, r3], trace=True)
    print(trace)                   # verbose multi-line report
    trace.format("compact")        # one line
    trace.cancelled_terms()        # every term that cancelled, in order

Steps hold RatioPairRef views (top, bot) of the ratios, whatever their
representation.
"""

from typing import Any, Dict, List


def _format_ratio(ratio: Any) -> str:
    top, bot = ratio
    return f"{list(top)!r} / {list(bot)!r}"


class CompositionStep:
    """A single pairwise composition in a fold."""

    def __init__(self, index: int, left: Any, right: Any, after: Any, cancelled: List):
        self.index = index
        self.left = left
        self.right = right
        self.after = after
        self.cancelled = cancelled

    def __repr__(self) -> str:
        return (f"step[{self.index}]: * {_format_ratio(self.right)} "
                f"→ {_format_ratio(self.after)} (cancelled {self.cancelled!r})")

    def to_dict(self) -> Dict:
        """Convert step to dictionary for serialization."""
        return {
            "index": self.index,
            "left": [list(side) for side in self.left],
            "right": [list(side) for side in self.right],
            "after": [list(side) for side in self.after],
            "cancelled": list(self.cancelled),
        }


class CompositionTrace:
    """
    A trace of every pairwise composition in a fold.

    Formatting options:
        - Default repr: verbose multi-line format
        - format("compact"): single line with the cancellation count
        - format("cancelled"): just the cancelled terms
        - to_dict(): JSON-serializable dictionary (for JSON-safe terms)
    """

    def __init__(self):
        self.steps: List[CompositionStep] = []
        self.initial: Any = None
        self.final: Any = None

    def add_step(self, step: CompositionStep):
        self.steps.append(step)

    def format(self, style: str = "verbose") -> str:
        """
        Format the trace.

        Args:
            style: One of "verbose", "compact", "cancelled"
        """
        if style == "compact":
            count = len(self.cancelled_terms())
            return (f"{_format_ratio(self.initial)} --[{len(self.steps)} steps, "
                    f"{count} cancelled]--> {_format_ratio(self.final)}")

        elif style == "cancelled":
            terms = self.cancelled_terms()
            return ", ".join(repr(t) for t in terms) if terms else "(nothing cancelled)"

        else:  # verbose (default)
            return repr(self)

    def __repr__(self) -> str:
        lines = [f"Initial: {_format_ratio(self.initial)}"]
        for i, step in enumerate(self.steps, 1):
            lines.append(f"  {i}. {step}")
        lines.append(f"Final: {_format_ratio(self.final)}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        """Iterate over composition steps."""
        return iter(self.steps)

    def __bool__(self) -> bool:
        """True if any cancellation happened."""
        return any(step.cancelled for step in self.steps)

    def cancelled_terms(self) -> List:
        """All cancelled terms, in fold order."""
        return [term for step in self.steps for term in step.cancelled]

    def to_dict(self) -> Dict:
        """Convert trace to dictionary for JSON serialization."""
        return {
            "initial": [list(side) for side in self.initial],
            "final": [list(side) for side in self.final],
            "steps": [step.to_dict() for step in self.steps],
            "step_count": len(self.steps),
        }

    def summary(self) -> str:
        """Get a brief summary of the composition."""
        if not self.steps:
            return "No composition performed"
        return (f"{len(self.steps)} compositions, "
                f"{len(self.cancelled_terms())} terms cancelled")
