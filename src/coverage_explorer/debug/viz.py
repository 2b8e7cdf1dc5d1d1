"""
Terminal rendering of one decision's candidate scores.

One row per legal move that applied: primary score, secondary score, its
rank in the secondary ordering, and a marker on the chosen move.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence

from coverage_explorer.core.types import CandidateScore, Move, SecondaryScore

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    "green": "\033[38;5;28m",
    "red": "\033[38;5;124m",
    "yellow": "\033[38;5;142m",
    "gray": "\033[38;5;245m",
    "cyan": "\033[38;5;37m",
}


def score_color(score: float, best: float) -> str:
    """Color by closeness to the best score in the table."""
    if best <= 0:
        return FG["gray"]
    ratio = score / best
    if ratio >= 0.95:
        return FG["green"]
    if ratio >= 0.75:
        return FG["yellow"]
    return FG["red"]


# ═══════════════════════════════════════════════════════════════════════════════
# Text utilities
# ═══════════════════════════════════════════════════════════════════════════════

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    gap = max(0, width - visible_len(text))
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


# ═══════════════════════════════════════════════════════════════════════════════
# Table rendering
# ═══════════════════════════════════════════════════════════════════════════════

H, V = "─", "│"
CORNERS = {"tl": "┌", "tr": "┐", "bl": "└", "br": "┘"}
TEES = {"lt": "├", "rt": "┤"}
TABLE_W = 46


def hline(left: str, right: str) -> str:
    return f"{left}{H * TABLE_W}{right}"


def trow(content: str) -> str:
    padding = " " * max(0, TABLE_W - visible_len(content))
    return f"{V}{content}{padding}{V}"


def render_candidates(
    candidates: Sequence[CandidateScore],
    ranked: Sequence[SecondaryScore],
    chosen: Optional[Move],
    tie_break: bool = False,
) -> str:
    """
    Render the candidate table for one decision.

    Args:
        candidates: Primary scores, in move order
        ranked: Secondary scores, best first
        chosen: Move that decide() returned
        tie_break: Whether the tie-break picked chosen
    """
    secondary: Dict[Move, float] = {s.move: s.score for s in ranked}
    positions: Dict[Move, int] = {s.move: i for i, s in enumerate(ranked)}
    best = max((c.score for c in candidates), default=0.0)

    lines: List[str] = []
    lines.append(hline(CORNERS["tl"], CORNERS["tr"]))
    mode = f"{FG['cyan']}tie-break{RESET}" if tie_break else f"{FG['green']}primary{RESET}"
    lines.append(trow(f" {BOLD}MOVE ANALYSIS{RESET}  {len(candidates)} scored, via {mode}"))
    lines.append(hline(TEES["lt"], TEES["rt"]))
    lines.append(trow(
        f"{DIM} {pad('Move', 10)}{pad('Primary', 10, 'right')}"
        f"{pad('Second', 10, 'right')}{pad('Rank', 8, 'right')}{RESET}"
    ))
    lines.append(hline(TEES["lt"], TEES["rt"]))

    for move, score in candidates:
        sec = secondary.get(move)
        pos = positions.get(move)
        sec_txt = f"{sec:.3f}" if sec is not None else "-"
        pos_txt = f"#{pos + 1}" if pos is not None else "-"
        sel = f" {FG['green']}◀{RESET}" if move == chosen else ""
        lines.append(trow(
            f" {pad(str(move), 10)}"
            f"{pad(score_color(score, best) + f'{score:.2f}' + RESET, 10, 'right')}"
            f"{pad(sec_txt, 10, 'right')}"
            f"{pad(FG['gray'] + pos_txt + RESET, 8, 'right')}{sel}"
        ))

    lines.append(hline(CORNERS["bl"], CORNERS["br"]))
    return "\n".join(lines)
