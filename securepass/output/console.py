"""
SecurePass Console Output
==========================

Rich-based renderers for generation reports, strength estimates,
distribution audits and templates.

This is the only place where a strength tier is mapped to a colour and a
display label; the core returns tier identifiers only.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import SecurePassConsole
from securepass.core.models import (
    DistributionAudit,
    GenerationReport,
    PasswordTemplate,
    StrengthResult,
    StrengthTier,
)
from securepass.output.formatter import display_text
from securepass.templates import detect_template


# ===================================================================== #
#  Presentation lookup tables keyed by tier
# ===================================================================== #

TIER_COLOURS: dict[StrengthTier, str] = {
    StrengthTier.VERY_WEAK: "#dc2626",
    StrengthTier.WEAK: "#ea580c",
    StrengthTier.FAIR: "#ca8a04",
    StrengthTier.STRONG: "#16a34a",
    StrengthTier.VERY_STRONG: "#059669",
}

TIER_LABELS: dict[StrengthTier, str] = {
    StrengthTier.VERY_WEAK: "Very Weak",
    StrengthTier.WEAK: "Weak",
    StrengthTier.FAIR: "Fair",
    StrengthTier.STRONG: "Strong",
    StrengthTier.VERY_STRONG: "Very Strong",
}


class SecurePassConsoleOutput:
    """Console renderers for SecurePass results.

    Usage::

        output = SecurePassConsoleOutput(SecurePassConsole())
        output.display_generation(report, readable=True)
        output.display_strength(result)
    """

    _METER_WIDTH = 40

    def __init__(self, console: Optional[SecurePassConsole] = None) -> None:
        self.console = console or SecurePassConsole()

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def display_generation(
        self, report: GenerationReport, *, readable: bool = False
    ) -> None:
        """Show a generated password with its strength meter."""
        self.console.section("Generated Password")
        self.console.print(
            Panel(
                Text(display_text(report.password, readable), style="bold bright_white"),
                title=f"{report.options.length} characters",
                border_style="bright_cyan",
            )
        )
        self.console.print(self._meter(report.strength))
        template = detect_template(report.options)
        self.console.key_values(
            "Generation",
            [
                ("Template", template.name if template else "custom"),
                ("Alphabet size", report.alphabet_size),
                ("Theoretical entropy", f"{report.theoretical_entropy:.2f} bits"),
                ("Estimated entropy", f"{report.strength.entropy:.2f} bits"),
                ("Crack time (1e9 guesses/s)", report.strength.crack_time),
            ],
        )

    def display_batch(
        self, reports: Sequence[GenerationReport], *, readable: bool = False
    ) -> None:
        """Show several generated passwords in one table."""
        tbl = Table(
            title="Generated Passwords",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Password", style="bold")
        tbl.add_column("Entropy", justify="right")
        tbl.add_column("Strength")
        for idx, report in enumerate(reports, start=1):
            tier = report.strength.label
            tbl.add_row(
                str(idx),
                Text(display_text(report.password, readable)),
                f"{report.strength.entropy:.1f} bits",
                Text(TIER_LABELS[tier], style=f"bold {TIER_COLOURS[tier]}"),
            )
        self.console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Strength
    # ------------------------------------------------------------------ #

    def display_strength(self, result: StrengthResult) -> None:
        """Show a strength estimate with meter, details, patterns and hints."""
        self.console.section("Strength Analysis")
        self.console.print(self._meter(result))

        classes = ", ".join(c.value for c in result.character_classes) or "-"
        self.console.key_values(
            "Details",
            [
                ("Length", result.length),
                ("Distinct characters", result.distinct_characters),
                ("Character classes", classes),
                ("Pool size", result.pool_size),
                ("Raw entropy", f"{result.raw_entropy:.2f} bits"),
                ("Effective entropy", f"{result.entropy:.2f} bits"),
                ("Crack time (1e9 guesses/s)", result.crack_time),
            ],
        )

        if result.patterns:
            self.console.print("[bold]Patterns Detected:[/bold]")
            for pattern in result.patterns:
                self.console.print(
                    f"  [yellow]⚠[/yellow] {escape(pattern.pattern_type)} "
                    f"at position {pattern.position} "
                    f"(penalty: -{pattern.penalty:.1f} bits)"
                )

        if result.feedback:
            self.console.print("[bold]Suggestions:[/bold]")
            for hint in result.feedback:
                self.console.print(f"  [bright_cyan]•[/bright_cyan] {hint}")

    def _meter(self, result: StrengthResult) -> Panel:
        colour = TIER_COLOURS[result.label]
        filled = (result.score + 1) * self._METER_WIDTH // 5 if result.entropy > 0 else 0

        meter = Text()
        meter.append(f"Score: {result.score}/4  ", style="bold")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (self._METER_WIDTH - filled), style="dim")
        meter.append(f"  {TIER_LABELS[result.label].upper()}", style=f"bold {colour}")
        return Panel(meter, title="Strength Meter", border_style="cyan")

    # ------------------------------------------------------------------ #
    #  Audit
    # ------------------------------------------------------------------ #

    def display_audit(self, audit: DistributionAudit, alphabet: str = "") -> None:
        """Show chi-squared audit results and per-character counts."""
        self.console.section("Distribution Audit")
        verdict = (
            "[sp.success]UNIFORM[/sp.success]" if audit.passed
            else "[sp.error]NON-UNIFORM[/sp.error]"
        )
        self.console.key_values(
            "Chi-squared goodness of fit",
            [
                ("Alphabet size", audit.alphabet_size),
                ("Samples", audit.sample_size),
                ("Expected per character", f"{audit.sample_size / audit.alphabet_size:.1f}"),
                ("Chi-squared", f"{audit.chi_squared:.2f} (dof {audit.alphabet_size - 1})"),
                ("p-value", f"{audit.p_value:.4g}"),
                ("Max relative deviation", f"{audit.max_deviation:.2%}"),
                ("Verdict", verdict),
            ],
        )
        if alphabet:
            rows = sorted(zip(alphabet, audit.counts), key=lambda item: item[1])
            extremes = rows[:3] + rows[-3:] if len(rows) > 6 else rows
            self.console.table(
                "Least / most drawn",
                ["Character", "Count"],
                [(char, count) for char, count in extremes],
            )

    # ------------------------------------------------------------------ #
    #  Templates
    # ------------------------------------------------------------------ #

    def display_templates(self, templates: Sequence[PasswordTemplate]) -> None:
        """List generation templates and their options."""
        rows = []
        for template in templates:
            opts = template.options
            classes = "+".join(c.value for c in opts.selected_classes)
            flags = [
                name for name, on in (
                    ("exclude-similar", opts.exclude_similar),
                    ("no-repeat", opts.prevent_repeating),
                    ("readable", template.readable_format),
                ) if on
            ]
            rows.append((
                template.key,
                template.name,
                opts.length,
                classes,
                ", ".join(flags) or "-",
                template.description,
            ))
        self.console.table(
            "Templates",
            ["Key", "Name", "Length", "Classes", "Flags", "Description"],
            rows,
            styles=["bold", "", "", "", "dim", ""],
        )
