"""Violation record construction.

One factory method per violation kind; messages, labels and fix
suggestions live here so rule engines only decide *who* violates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.model.enums import DeclarationKind, ViolationKind
from archrules.domain.model.violation import RuleViolation

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.application.index.declaration_index import DeclarationIndex
    from archrules.domain.model.enums import Visibility
    from archrules.domain.model.field import Field
    from archrules.domain.model.location import CodeSpan
    from archrules.domain.model.module_use import ModuleUse


class ViolationFactory:
    """Builds RuleViolation records for one declaration kind.

    File paths are made relative to the index's project root.
    """

    __slots__ = ("_index", "_title")

    def __init__(self, index: DeclarationIndex, kind: DeclarationKind) -> None:
        """Initialize factory.

        Args:
            index: Index providing the project root
            kind: Declaration kind used in messages ("Struct 'X' ...")
        """
        self._index = index
        self._title = kind.title

    def _make(
        self,
        kind: ViolationKind,
        *,
        message: str,
        subject: str,
        file: Path,
        span: CodeSpan,
        label: str,
        suggestion: str,
        **details: str,
    ) -> RuleViolation:
        return RuleViolation(
            kind=kind,
            message=message,
            subject=subject,
            file=self._index.relative_file(file),
            span=span,
            label=label,
            suggestion=suggestion,
            details=details,
        )

    def be_public(
        self, name: str, file: Path, span: CodeSpan, visibility: Visibility
    ) -> RuleViolation:
        """Declaration should be pub but is not."""
        return self._make(
            ViolationKind.BE_PUBLIC,
            message=f"{self._title} '{name}' should be public",
            subject=name,
            file=file,
            span=span,
            label="should be public",
            suggestion="Try adding `pub` visibility",
            visibility=visibility.name.lower(),
        )

    def be_private(
        self, name: str, file: Path, span: CodeSpan, visibility: Visibility
    ) -> RuleViolation:
        """Declaration should not be pub but is."""
        return self._make(
            ViolationKind.BE_PRIVATE,
            message=f"{self._title} '{name}' should be private",
            subject=name,
            file=file,
            span=span,
            label="should be private",
            suggestion="Try removing `pub` visibility",
            visibility=visibility.name.lower(),
        )

    def name_match(self, name: str, expected: str, file: Path, span: CodeSpan) -> RuleViolation:
        """Simple name differs from the expected one."""
        return self._make(
            ViolationKind.NAME_MATCH,
            message=f"{self._title} '{name}' name should match pattern '{expected}'",
            subject=name,
            file=file,
            span=span,
            label="does not match",
            suggestion=f"Try renaming '{name}' accordingly",
            pattern=expected,
        )

    def derive(self, name: str, trait: str, file: Path, span: CodeSpan) -> RuleViolation:
        """Derive list lacks trait."""
        return self._make(
            ViolationKind.DERIVE,
            message=f"{self._title} '{name}' should derive '{trait}'",
            subject=name,
            file=file,
            span=span,
            label="missing derive",
            suggestion=f"Try adding `#[derive({trait})]` to `{name}`",
            trait=trait,
        )

    def implement(self, name: str, trait: str, file: Path, span: CodeSpan) -> RuleViolation:
        """No impl block for trait."""
        return self._make(
            ViolationKind.IMPLEMENT,
            message=f"{self._title} '{name}' should implement '{trait}'",
            subject=name,
            file=file,
            span=span,
            label="missing impl",
            suggestion=f"Try writing the impl block `impl {trait} for {name} {{ ... }}`",
            trait=trait,
        )

    def implement_or_derive(
        self, name: str, trait: str, file: Path, span: CodeSpan
    ) -> RuleViolation:
        """Neither derives nor implements trait."""
        return self._make(
            ViolationKind.IMPLEMENT_OR_DERIVE,
            message=f"{self._title} '{name}' should implement or derive '{trait}'",
            subject=name,
            file=file,
            span=span,
            label="missing derive or impl",
            suggestion=(
                f"Try adding `#[derive({trait})]` to `{name}`; if that is not possible "
                f"write the impl block `impl {trait} for {name} {{ ... }}` manually"
            ),
            trait=trait,
        )

    def public_field(self, name: str, field: Field, file: Path) -> RuleViolation:
        """Field is pub but all fields should be private."""
        return self._make(
            ViolationKind.ONLY_PRIVATE_FIELDS,
            message=f"{self._title} '{name}' should not have public fields",
            subject=name,
            file=file,
            span=field.span,
            label="public field",
            suggestion=f"Try removing `pub` from field `{field.identifier}` visibility",
            field=field.identifier,
        )

    def private_field(self, name: str, field: Field, file: Path) -> RuleViolation:
        """Field is not pub but all fields should be public."""
        return self._make(
            ViolationKind.ONLY_PUBLIC_FIELDS,
            message=f"{self._title} '{name}' should not have private fields",
            subject=name,
            file=file,
            span=field.span,
            label="private field",
            suggestion=f"Try changing field visibility to `pub {field.identifier}`",
            field=field.identifier,
        )

    def dependency_match(
        self, name: str, use: ModuleUse, pattern: str, file: Path
    ) -> RuleViolation:
        """Import edge does not match the allowed pattern."""
        return self._make(
            ViolationKind.DEPENDENCY_MATCH,
            message=f"{self._title} '{name}' should only have dependencies matching '{pattern}'",
            subject=name,
            file=file,
            span=use.span,
            label="name does not match",
            suggestion=f"Try removing usage of '{use.path}'",
            pattern=pattern,
            dependency=use.path,
        )

    def forbidden_access(
        self,
        *,
        layer: str,
        layer_prefix: str,
        accessed_in: str,
        use: ModuleUse,
        file: Path,
    ) -> RuleViolation:
        """Import edge reaches into a protected layer from outside."""
        return self._make(
            ViolationKind.DEPENDENCY_ACCESS,
            message=f"Forbidden access to layer '{layer}' in {accessed_in}",
            subject=accessed_in.rsplit("::", 1)[-1],
            file=file,
            span=use.span,
            label="Forbidden usage",
            suggestion=f"Try refactoring your code to remove usage of '{layer_prefix}'",
            layer=layer,
            layer_prefix=layer_prefix,
            accessed_in=accessed_in,
            dependency=use.path,
        )
