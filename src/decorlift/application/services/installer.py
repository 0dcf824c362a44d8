"""Installer: commit the fold result.

Members: define_property on the resolved owner, skipped when the final
value is ABSENT (prior installation by the surrounding machinery stays).
Classes: rebind the declaration name to the final constructor.
Validation happens before commit: a malformed descriptor installs nothing.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING

from decorlift.domain.exceptions import MalformedDescriptorError
from decorlift.domain.model.configuration import DesugarConfig
from decorlift.domain.model.descriptor import ABSENT, PropertyDescriptor, check_member_kind

if TYPE_CHECKING:
    from decorlift.domain.model.descriptor import Absent, MemberKind
    from decorlift.domain.model.target import Target

logger = logging.getLogger(__name__)


class Installer:
    """Commits final descriptors and constructors."""

    def __init__(self, config: DesugarConfig | None = None) -> None:
        """Initialize installer.

        Args:
            config: Desugar configuration. Uses defaults if None.
        """
        self._config = config or DesugarConfig()

    def install(
        self,
        target: Target,
        name: str,
        final: PropertyDescriptor | Absent,
        kind: MemberKind,
    ) -> bool:
        """Define final descriptor on target owner.

        Args:
            target: Resolved member target
            name: Property name
            final: Fold output
            kind: Declaration member kind, checked when strict_member_kinds

        Returns:
            True if defined, False if final was ABSENT (no-op)

        Raises:
            MalformedDescriptorError: Final value not a descriptor, or kind mismatch
        """
        if final is ABSENT:
            logger.debug("no final descriptor for %r, leaving %s target untouched", name, target.kind.name)
            return False
        if not isinstance(final, PropertyDescriptor):
            raise MalformedDescriptorError(
                f"final value is {type(final).__name__}, expected descriptor",
                name=name,
            )
        if self._config.strict_member_kinds:
            check_member_kind(final, kind, name=name)

        logger.debug("installing %r on %s target", name, target.kind.name)
        target.property_owner.define_property(name, final)
        return True

    def rebind(self, environment: MutableMapping[str, object], name: str, final: object) -> None:
        """Bind class declaration name to final constructor.

        Args:
            environment: Binding environment owned by the caller
            name: Declaration name
            final: Final constructor (possibly a different object)
        """
        logger.debug("rebinding %r to %r", name, final)
        environment[name] = final
