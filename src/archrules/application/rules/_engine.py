"""Two-phase rule evaluation.

Phase 1 narrows the declaration universe condition by condition.
Phase 2 checks every assertion against the whole matched set and folds
the outcomes into one verdict. A rule passes only when that verdict holds
and no assertion reported a violation.

Both phases walk their tokens in authoring order. A conjunction token
only switches the mode for the terms that follow it; it never produces
a match set or an outcome of its own.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from archrules.application.rules.conjunction import Conjunction
from archrules.application.rules.reports import ViolationFactory
from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.model.assertion_result import AssertionResult
from archrules.domain.model.filters import Filters

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archrules.application.index.declaration_index import DeclarationIndex
    from archrules.application.matches import Matches
    from archrules.application.rules.assertions import Assertion, AssertionToken
    from archrules.application.rules.conditions import Condition, ConditionToken
    from archrules.domain.model.enums import DeclarationKind
    from archrules.domain.model.violation import RuleViolation

logger = logging.getLogger(__name__)


class ArchRule[M: Matches](ABC):
    """Single-use rule over one declaration kind.

    Subclasses define the universe of candidates, how each condition
    selects from a candidate set and how each assertion finds violators.

    Attributes:
        kind: Declaration kind the rule is about
        plural: Lowercase plural used in descriptions ("structs")
        supported_conditions: Condition classes accepted
        supported_assertions: Assertion classes accepted
    """

    kind: ClassVar[DeclarationKind]
    plural: ClassVar[str]
    supported_conditions: ClassVar[tuple[type, ...]]
    supported_assertions: ClassVar[tuple[type, ...]]

    def __init__(
        self,
        index: DeclarationIndex,
        conditions: Sequence[ConditionToken],
        assertions: Sequence[AssertionToken],
        filters: Filters | None = None,
        *,
        name: str | None = None,
    ) -> None:
        """Initialize rule.

        Args:
            index: Declaration index to evaluate against
            conditions: Conditions and conjunctions in authoring order (may be empty)
            assertions: Assertions and conjunctions in authoring order
            filters: Subtree exclusion filters (default: exclude nothing)
            name: Rule name used in errors (default: "<plural> rule")

        Raises:
            RuleValidationError: If the token sequences are malformed or use
                vocabulary this kind does not support
        """
        if index is None:
            raise TypeError("index must not be None")
        self._index = index
        self._filters = filters if filters is not None else Filters.none()
        self._name = name or f"{self.plural} rule"
        self._conditions = tuple(conditions)
        self._assertions = tuple(assertions)
        self._validate(self._conditions, self.supported_conditions, "condition", allow_empty=True)
        self._validate(self._assertions, self.supported_assertions, "assertion", allow_empty=False)
        self._violations = ViolationFactory(index, self.kind)
        self._evaluated = False

    @property
    def name(self) -> str:
        """Rule name."""
        return self._name

    def _validate(
        self,
        tokens: tuple[object, ...],
        supported: tuple[type, ...],
        what: str,
        *,
        allow_empty: bool,
    ) -> None:
        if not tokens:
            if allow_empty:
                return
            raise RuleValidationError(self._name, f"at least one {what} is required")

        # terms and conjunctions must alternate: term (conjunction term)*
        for position, token in enumerate(tokens):
            expect_term = position % 2 == 0
            if isinstance(token, Conjunction):
                if expect_term:
                    reason = (
                        f"{what} conjunction '{token.name}' at position {position} "
                        "has no left operand"
                    )
                    raise RuleValidationError(self._name, reason)
            elif not expect_term:
                reason = f"{what}s at positions {position - 1} and {position} need a conjunction"
                raise RuleValidationError(self._name, reason)
            elif not isinstance(token, supported):
                reason = f"{type(token).__name__} is not a supported {what} for {self.plural}"
                raise RuleValidationError(self._name, reason)
        if isinstance(tokens[-1], Conjunction):
            reason = f"{what} sequence ends with a dangling conjunction"
            raise RuleValidationError(self._name, reason)

    def evaluate(self) -> AssertionResult:
        """Run both phases once.

        Returns:
            Result with expected description, verdict and violations

        Raises:
            RuleValidationError: If the rule was already evaluated
            IndexInvariantError: If a violator has no source span
        """
        if self._evaluated:
            raise RuleValidationError(self._name, "rule was already evaluated")
        self._evaluated = True

        expected: list[str] = []
        subject = self._apply_conditions(expected)
        success, violations = self._apply_assertions(subject, expected)

        # every reported violation fails the rule, whatever the fold says
        result = AssertionResult(
            expected="".join(expected),
            violations=tuple(violations),
            passed=success and not violations,
        )
        logger.debug(
            "rule '%s' evaluated: %d matched, passed=%s, %d violations",
            self._name,
            len(subject),
            result.passed,
            result.violation_count,
        )
        return result

    def _apply_conditions(self, expected: list[str]) -> M:
        universe = self._universe()
        if not self._conditions:
            expected.append(f"All {self.plural} should ")
            return universe

        expected.append(f"{self.plural.capitalize()} that ")
        matches = universe.empty()
        conjunction = Conjunction.OR
        for token in self._conditions:
            if isinstance(token, Conjunction):
                expected.append(token.connective)
                conjunction = token
                continue

            expected.append(token.describe())
            if conjunction is Conjunction.OR:
                matches.extend(self._select(token, universe))
            else:
                matches = self._select(token, matches)

        expected.append(" to ")
        return matches

    def _apply_assertions(
        self, subject: M, expected: list[str]
    ) -> tuple[bool, list[RuleViolation]]:
        success = False
        conjunction = Conjunction.OR
        violations: list[RuleViolation] = []
        for token in self._assertions:
            if isinstance(token, Conjunction):
                expected.append(token.connective)
                conjunction = token
                continue

            expected.append(token.describe())
            found = self._check(token, subject)
            violations.extend(found)
            outcome = not found
            if conjunction is Conjunction.OR:
                success = success or outcome
            else:
                success = success and outcome

        return success, violations

    @abstractmethod
    def _universe(self) -> M:
        """Every candidate reachable under the rule's filters."""

    @abstractmethod
    def _select(self, condition: Condition, candidates: M) -> M:
        """Members of candidates satisfying condition."""

    @abstractmethod
    def _check(self, assertion: Assertion, subject: M) -> list[RuleViolation]:
        """One violation per failing member (or member part) of subject."""

    def _unsupported(self, token: object) -> RuleValidationError:
        return RuleValidationError(
            self._name, f"{type(token).__name__} is not supported for {self.plural}"
        )
