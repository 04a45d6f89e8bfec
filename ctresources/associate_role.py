"""Associate roles: the resource model, drafts and update actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class RemoteAssociateRole:
    """An associate role as returned by the platform."""

    id: str
    version: int
    key: str
    buyer_assignable: bool = False
    name: str | None = None
    permissions: tuple[str, ...] = ()


@dataclass(frozen=True)
class AssociateRoleDraft:
    """The data needed to create an associate role."""

    key: str
    name: str | None = None
    buyer_assignable: bool | None = None
    permissions: tuple[str, ...] = ()


@dataclass(frozen=True)
class SetAssociateRoleName:
    name: str | None


@dataclass(frozen=True)
class ChangeBuyerAssignable:
    buyer_assignable: bool


@dataclass(frozen=True)
class SetPermissions:
    permissions: tuple[str, ...]


AssociateRoleUpdateAction = Union[SetAssociateRoleName, ChangeBuyerAssignable, SetPermissions]


@dataclass(frozen=True)
class AssociateRoleUpdate:
    """A versioned batch of update actions."""

    version: int = 0
    actions: tuple[AssociateRoleUpdateAction, ...] = ()


@dataclass(frozen=True)
class AssociateRole:
    """Resource data of an associate role; ``None`` stands for a null value."""

    id: str | None = None
    key: str | None = None
    version: int | None = None
    name: str | None = None
    buyer_assignable: bool | None = None
    permissions: tuple[str, ...] = field(default=())

    def draft(self) -> AssociateRoleDraft:
        """Return the draft that creates this role."""
        return AssociateRoleDraft(
            key=self.key or "",
            name=self.name,
            buyer_assignable=self.buyer_assignable,
            permissions=tuple(self.permissions),
        )

    def update_actions(self, plan: AssociateRole) -> AssociateRoleUpdate:
        """Return the update that turns this state into ``plan``."""
        actions: list[AssociateRoleUpdateAction] = []

        if self.name != plan.name:
            actions.append(SetAssociateRoleName(plan.name))

        if self.buyer_assignable != plan.buyer_assignable:
            actions.append(ChangeBuyerAssignable(bool(plan.buyer_assignable)))

        if tuple(self.permissions) != tuple(plan.permissions):
            # Permissions are replaced as a whole rather than diffed.
            actions.append(SetPermissions(tuple(plan.permissions)))

        return AssociateRoleUpdate(version=self.version or 0, actions=tuple(actions))


def from_native(role: RemoteAssociateRole) -> AssociateRole:
    """Build the resource data from a role returned by the platform."""
    return AssociateRole(
        id=role.id,
        key=role.key,
        version=role.version,
        name=role.name,
        buyer_assignable=role.buyer_assignable,
        permissions=tuple(role.permissions),
    )