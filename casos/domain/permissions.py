"""
Evaluador de permisos por (usuario, caso).

Función pura: no consulta la BD ni tiene efectos. El llamador debe haber
resuelto ambos objetos; sólo se leen ``user.id``, ``user.role``,
``caso.supervisor_id`` y ``caso.tipo_caso``.
"""
from dataclasses import asdict, dataclass

from security.domain.enums import Role


@dataclass(frozen=True)
class CapabilitySet:
    can_view: bool
    can_edit: bool
    can_delete: bool
    can_add_version: bool  # solo supervisor o admin
    can_add_comment: bool  # usuarios de la misma categoría
    can_upload_documents: bool
    can_delete_documents: bool
    is_supervisor: bool
    is_admin: bool

    def as_dict(self) -> dict:
        return asdict(self)


def evaluate(user, caso) -> CapabilitySet:
    is_admin = user.role == Role.ADMIN
    is_supervisor = caso.supervisor_id is not None and caso.supervisor_id == user.id
    same_category = is_admin or (user.role is not None and user.role == caso.tipo_caso)
    privileged = is_admin or is_supervisor

    return CapabilitySet(
        can_view=privileged or same_category,
        can_edit=privileged,
        can_delete=is_admin,
        can_add_version=privileged,
        can_add_comment=same_category,
        can_upload_documents=privileged or same_category,
        can_delete_documents=privileged,
        is_supervisor=is_supervisor,
        is_admin=is_admin,
    )
