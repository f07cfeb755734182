#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CAESAR CIPHER CRACKER
━━━━━━━━━━━━━━━━━━━━━
Recovers the shift of an English Caesar ciphertext:
  1. Decrypt under each of the 26 shifts
  2. Take the letter-frequency distribution of every candidate
  3. Score it against the English table with chi-squared
  4. Keep the lowest score (ties go to the smallest shift)
"""

import sys
import logging
import argparse
from typing import List, Mapping, Optional, Tuple
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.logging import RichHandler
from rich.markup import escape
from rich import box

from caesar_encode import EN_SIZE, decrypt
from frequency import distribution, index_of_coincidence, letter_counts, reference

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# DATA CLASSES
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ShiftResult:
    """Result of trying one shift"""
    shift: int
    text: str
    chi_sq: float          # Chi-squared (lower = better)


# ═══════════════════════════════════════════════════════════════════════════════
# SCORING
# ═══════════════════════════════════════════════════════════════════════════════

def chi_squared(observed: Mapping[str, float], expected: Mapping[str, float]) -> float:
    """
    Chi-squared over relative frequencies: Σ (o - e)² / e.
    Lower = better.

    Both sides are frequencies in [0..1], not raw counts, so the value is a
    weighted sum of squared deviations and does not grow with text length.
    Letters with a non-positive expected value are skipped.
    """
    chi_sq = 0.0
    for char, e in expected.items():
        if e > 0:
            diff = observed.get(char, 0.0) - e
            chi_sq += diff * diff / e
    return chi_sq


def analyze_shift(text: str, shift: int) -> ShiftResult:
    """Decrypts with one shift and scores the result against English"""
    decrypted = decrypt(text, shift)
    chi = chi_squared(distribution(decrypted), reference())
    logger.debug("shift %2d: chi2=%.6f", shift, chi)
    return ShiftResult(shift=shift, text=decrypted, chi_sq=chi)


def rank(text: str) -> List[ShiftResult]:
    """All 26 candidates, best first. Equal scores keep ascending shift order."""
    results = [analyze_shift(text, s) for s in range(EN_SIZE)]
    results.sort(key=lambda r: (r.chi_sq, r.shift))
    return results


def solve(text: str) -> Tuple[int, str]:
    """
    Finds the most English-looking decryption.

    Returns (shift, plaintext). A text without letters scores the same
    under every shift and comes back unchanged with shift 0.
    """
    best = rank(text)[0]
    logger.info("best shift %d (chi2=%.6f)", best.shift, best.chi_sq)
    return best.shift, best.text


# ═══════════════════════════════════════════════════════════════════════════════
# UI
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    def __init__(self, console: Optional[Console] = None):
        self.c = console or Console()

    def header(self):
        self.c.print(Panel(
            "[bold cyan]CAESAR CRACKER[/bold cyan]\n"
            "[dim]Chi² letter-frequency analysis[/dim]",
            border_style="cyan", box=box.DOUBLE
        ))
        self.c.print()

    def info(self, n_letters: int, ic: float):
        self.c.print(Panel(
            f"🔤 Letters: [bold]{n_letters:,}[/bold]\n"
            f"📊 Index of coincidence: [bold]{ic:.4f}[/bold] "
            f"[dim](English ≈ 0.0667, random ≈ 0.0385)[/dim]",
            title="[bold]Input[/bold]", border_style="blue"
        ))
        self.c.print()

    def result(self, best: ShiftResult, top: List[ShiftResult]):
        # Plain text without a frame, easy to copy
        self.c.print()
        self.c.print("[bold green]💬 DECRYPTED TEXT:[/bold green]")
        self.c.print()
        self.c.print(escape(best.text))
        self.c.print()

        self.c.print(
            f"[dim]🔑 Key: [bold yellow]{best.shift}[/bold yellow]  "
            f"Chi²={best.chi_sq:.4f}[/dim]"
        )
        self.c.print()

        t = Table(
            box=box.SIMPLE, show_header=True,
            header_style="bold", title="[bold]Alternatives[/bold]"
        )
        t.add_column("#", width=4)
        t.add_column("Key", width=6)
        t.add_column("Chi²", width=10)
        t.add_column("Text")

        for i, r in enumerate(top, 1):
            marker = "⭐" if i == 1 else str(i)
            preview = r.text[:60] + "…" if len(r.text) > 60 else r.text
            t.add_row(marker, str(r.shift), f"{r.chi_sq:.4f}", escape(preview))

        self.c.print(t)

    def ask_multiline(self, prompt: str) -> str:
        """Multiline input: an empty line or Ctrl+D ends it"""
        self.c.print(f"[bold yellow]{prompt}[/bold yellow]")
        self.c.print("[dim](empty line = end of input)[/dim]")

        lines = []
        try:
            while True:
                line = input()
                if line == '':
                    break
                lines.append(line)
        except EOFError:
            pass
        return '\n'.join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION
# ═══════════════════════════════════════════════════════════════════════════════

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog='caesar',
        description='Caesar Cipher Cracker: automatic key recovery for English text',
    )
    p.add_argument('text', nargs='*', help='Ciphertext')
    p.add_argument('-r', '--raw', action='store_true',
                   help='Print only the decrypted text (handy for pipes)')
    p.add_argument('-t', '--top', type=int, default=5,
                   help='How many alternatives to list (default: 5)')
    p.add_argument('-v', '--verbose', action='count', default=0,
                   help='-v logs the chosen shift, -vv every candidate score')
    return p.parse_args(argv)


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def run(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    top_n = min(max(args.top, 1), EN_SIZE)

    ui = None
    if args.text:
        text = ' '.join(args.text)
    elif not sys.stdin.isatty():
        text = sys.stdin.read().rstrip('\n')
    else:
        if args.raw:
            print("Error: --raw needs the text as an argument or through a pipe",
                  file=sys.stderr)
            return 1
        ui = UI()
        ui.header()
        text = ui.ask_multiline("Enter the ciphertext:")
        if text.strip().lower() in ('exit', 'quit', 'q'):
            return 0

    if not text:
        return 0

    if args.raw:
        _, plaintext = solve(text)
        print(plaintext)
        return 0

    if ui is None:
        ui = UI()
        ui.header()

    ui.info(sum(letter_counts(text).values()), index_of_coincidence(text))

    results = rank(text)
    best = results[0]
    logger.info("best shift %d (chi2=%.6f)", best.shift, best.chi_sq)
    ui.result(best, results[:top_n])
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        return run(argv)
    except KeyboardInterrupt:
        print("\n👋")
        return 0
    except Exception as e:
        print(f"\n❌ {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
