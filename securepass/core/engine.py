"""
SecurePass Engine
==================

Facade over the generator, the strength estimator and the distribution
auditor. The engine wires configuration and logging into the core
components and returns unified report models to the CLI and library
callers.

Core errors propagate unchanged: the engine logs the failure (never the
password) and re-raises so the caller decides what the user sees.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

import math
from typing import Optional

from shared.config import SecurePassConfig
from shared.logger import SecurePassLogger

from securepass.analyzers.distribution import DistributionAuditor
from securepass.analyzers.strength import StrengthEstimator
from securepass.core.errors import EmptyAlphabetError, SecurePassError, ValidationError
from securepass.core.models import (
    DistributionAudit,
    GenerationOptions,
    GenerationReport,
    StrengthResult,
)
from securepass.generators.charset import alphabet_for
from securepass.generators.password import PasswordGenerator, validate_options
from securepass.generators.secure_random import RandomSource, SystemRandomSource

MAX_BATCH = 100


class SecurePassEngine:
    """Orchestrates password generation, strength estimation and audits.

    Usage::

        engine = SecurePassEngine()
        report = engine.generate(GenerationOptions(length=20))
        result = engine.evaluate("correct horse battery staple")
        audit = engine.audit(GenerationOptions(include_symbols=False))

    Attributes:
        config: SecurePass configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[SecurePassConfig] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or SecurePassConfig()
        self.logger = SecurePassLogger("engine")

        source = random_source or SystemRandomSource()
        self._generator = PasswordGenerator(
            source,
            max_redraws=self.config.generator.max_redraws,
        )
        self._estimator = StrengthEstimator(self.config.strength.weak_tokens)
        self._auditor = DistributionAuditor(
            source, significance=self.config.audit.significance
        )

    # ------------------------------------------------------------------ #
    #  Options
    # ------------------------------------------------------------------ #

    def default_options(self, **overrides: object) -> GenerationOptions:
        """Generation options from the ``[generator]`` config section.

        Keyword arguments override individual fields.
        """
        gen = self.config.generator
        values: dict[str, object] = {
            "length": gen.length,
            "include_uppercase": gen.include_uppercase,
            "include_lowercase": gen.include_lowercase,
            "include_numbers": gen.include_numbers,
            "include_symbols": gen.include_symbols,
            "exclude_similar": gen.exclude_similar,
            "prevent_repeating": gen.prevent_repeating,
            "exclude_characters": gen.exclude_characters,
            "require_each_class": gen.require_each_class,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return GenerationOptions(**values)

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(self, options: GenerationOptions) -> GenerationReport:
        """Generate a password and estimate its strength.

        Args:
            options: Generation request.

        Returns:
            GenerationReport with the password and its StrengthResult.

        Raises:
            SecurePassError: Any core failure, unchanged.
        """
        with self.logger.operation("generate"):
            try:
                with self.logger.timed("password generation"):
                    password = self._generator.generate(options)
            except SecurePassError as exc:
                self.logger.warning(
                    "Generation rejected: %s", exc,
                    error=type(exc).__name__, length=options.length,
                )
                raise

            alphabet_size = len(alphabet_for(options))
            strength = self._estimator.evaluate(password)
            self.logger.info(
                "Generated password",
                length=options.length,
                alphabet_size=alphabet_size,
                score=strength.score,
            )

        return GenerationReport(
            password=password,
            strength=strength,
            alphabet_size=alphabet_size,
            theoretical_entropy=round(options.length * math.log2(alphabet_size), 2)
            if alphabet_size > 1 else 0.0,
            options=options,
        )

    def generate_many(
        self, options: GenerationOptions, count: int
    ) -> list[GenerationReport]:
        """Generate *count* independent passwords with the same options.

        Raises:
            ValidationError: ``count`` outside ``[1, 100]``.
        """
        if not 1 <= count <= MAX_BATCH:
            raise ValidationError(f"Count must be between 1 and {MAX_BATCH}, got {count}")
        return [self.generate(options) for _ in range(count)]

    # ------------------------------------------------------------------ #
    #  Strength
    # ------------------------------------------------------------------ #

    def evaluate(self, password: str) -> StrengthResult:
        """Estimate the strength of any password string."""
        with self.logger.operation("evaluate"):
            result = self._estimator.evaluate(password)
            self.logger.info(
                "Evaluated password",
                length=result.length,
                score=result.score,
                patterns=len(result.patterns),
            )
        return result

    # ------------------------------------------------------------------ #
    #  Distribution audit
    # ------------------------------------------------------------------ #

    def audit(
        self, options: GenerationOptions, sample_size: Optional[int] = None
    ) -> DistributionAudit:
        """Audit draw uniformity over the alphabet described by *options*.

        Raises:
            ValidationError: Invalid options, alphabet or sample size.
            EmptyAlphabetError: Exclusions removed every character.
        """
        validate_options(options)
        alphabet = alphabet_for(options)
        if not alphabet:
            raise EmptyAlphabetError(
                "No characters remain after applying the exclusion rules"
            )
        samples = sample_size if sample_size is not None else self.config.audit.sample_size

        with self.logger.operation("audit"):
            with self.logger.timed("distribution audit"):
                result = self._auditor.audit(alphabet, samples)
            log = self.logger.info if result.passed else self.logger.warning
            log(
                "Distribution audit %s",
                "passed" if result.passed else "FAILED",
                alphabet_size=result.alphabet_size,
                sample_size=result.sample_size,
                p_value=result.p_value,
            )
        return result
