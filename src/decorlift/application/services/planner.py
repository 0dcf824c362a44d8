"""Planner: lower a decorated declaration to its operation sequence.

Pure: nothing is evaluated, applied or installed. The sequence is the
one DeclarationDispatcher executes:

    build initial value
    evaluate #0 .. #n-1      textual order
    apply #n-1 .. #0         reverse textual order
    install | rebind
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from decorlift.domain.model.declaration import (
    DeclarationShape,
    get_declaration_context,
    get_declaration_shape,
)
from decorlift.domain.model.operations import (
    ApplyOp,
    BuildInitialOp,
    DesugarPlan,
    EvaluateOp,
    InstallOp,
    Operation,
    RebindOp,
)
from decorlift.domain.model.target import resolve_target

if TYPE_CHECKING:
    from decorlift.domain.model.declaration import Declaration


def plan(declaration: Declaration) -> DesugarPlan:
    """Lower declaration to operations.

    Ambient decorators produce no operations; their sources are
    carried in DesugarPlan.ambient. Undecorated declarations lower to
    an empty operation sequence.

    Args:
        declaration: Declaration to lower

    Returns:
        DesugarPlan

    Raises:
        UnrecognizedDeclarationShapeError: Unknown declaration type
    """
    shape = get_declaration_shape(declaration)
    target = resolve_target(get_declaration_context(declaration))

    if declaration.decorators is None:
        return DesugarPlan(name=declaration.name, shape=shape, operations=())

    expressions = list(enumerate(declaration.decorators))
    executable = [(i, e) for i, e in expressions if not e.ambient]

    operations: list[Operation] = [BuildInitialOp(shape=shape, target=target.kind)]
    operations.extend(EvaluateOp(index=i, source=e.source) for i, e in executable)
    operations.extend(ApplyOp(index=i, source=e.source) for i, e in reversed(executable))
    if shape is DeclarationShape.CLASS:
        operations.append(RebindOp(name=declaration.name))
    else:
        operations.append(InstallOp(target=target.kind, name=declaration.name))

    return DesugarPlan(
        name=declaration.name,
        shape=shape,
        operations=tuple(operations),
        ambient=tuple(e.source for _, e in expressions if e.ambient),
    )
