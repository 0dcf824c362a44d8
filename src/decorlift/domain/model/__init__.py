"""Domain model: immutable value objects and the runtime object model."""

from decorlift.domain.model.configuration import DesugarConfig
from decorlift.domain.model.declaration import (
    AccessorDeclaration,
    ClassDeclaration,
    Declaration,
    DeclarationShape,
    LiteralAccessorDeclaration,
    LiteralMethodDeclaration,
    MemberDeclaration,
    MethodDeclaration,
    get_declaration_context,
    get_declaration_shape,
    get_member_kind,
)
from decorlift.domain.model.decorator import (
    AmbientDecorator,
    DecoratorExpression,
    DecoratorFunction,
    DecoratorList,
    ResolvedDecorator,
    SourceSpan,
)
from decorlift.domain.model.descriptor import (
    ABSENT,
    Absent,
    AccessorPair,
    DescriptorKind,
    MemberKind,
    PropertyDescriptor,
    build_default_descriptor,
    check_member_kind,
    coerce_descriptor,
)
from decorlift.domain.model.objects import ClassConstructor, PlainObject
from decorlift.domain.model.operations import (
    ApplyOp,
    BuildInitialOp,
    DesugarPlan,
    EvaluateOp,
    InstallOp,
    Operation,
    RebindOp,
    describe_operation,
)
from decorlift.domain.model.result import DesugarResult
from decorlift.domain.model.target import (
    ContainerKind,
    DeclarationContext,
    Target,
    TargetKind,
    resolve_target,
)
from decorlift.domain.model.trace import StepKind, TraceStep

__all__ = [
    # Descriptor model
    "ABSENT",
    "Absent",
    "AccessorPair",
    "DescriptorKind",
    "MemberKind",
    "PropertyDescriptor",
    "build_default_descriptor",
    "check_member_kind",
    "coerce_descriptor",
    # Targets
    "ContainerKind",
    "DeclarationContext",
    "Target",
    "TargetKind",
    "resolve_target",
    # Runtime objects
    "ClassConstructor",
    "PlainObject",
    # Decorators
    "AmbientDecorator",
    "DecoratorExpression",
    "DecoratorFunction",
    "DecoratorList",
    "ResolvedDecorator",
    "SourceSpan",
    # Declarations
    "AccessorDeclaration",
    "ClassDeclaration",
    "Declaration",
    "DeclarationShape",
    "LiteralAccessorDeclaration",
    "LiteralMethodDeclaration",
    "MemberDeclaration",
    "MethodDeclaration",
    "get_declaration_context",
    "get_declaration_shape",
    "get_member_kind",
    # Plans, results, traces
    "ApplyOp",
    "BuildInitialOp",
    "DesugarPlan",
    "DesugarResult",
    "EvaluateOp",
    "InstallOp",
    "Operation",
    "RebindOp",
    "StepKind",
    "TraceStep",
    "describe_operation",
    # Configuration
    "DesugarConfig",
]
