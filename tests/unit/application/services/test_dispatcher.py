"""Tests for application/services/dispatcher.py."""

import pytest

from decorlift.application.services.dispatcher import DeclarationDispatcher, build_initial_value
from decorlift.domain.exceptions import EvaluationError, MalformedDescriptorError, UnrecognizedDeclarationShapeError
from decorlift.domain.model.configuration import DesugarConfig
from decorlift.domain.model.declaration import DeclarationShape, get_declaration_context
from decorlift.domain.model.decorator import DecoratorExpression
from decorlift.domain.model.descriptor import ABSENT, PropertyDescriptor
from decorlift.domain.model.objects import ClassConstructor, PlainObject
from decorlift.domain.model.target import TargetKind, resolve_target
from decorlift.domain.model.trace import StepKind
from decorlift.infrastructure.adapters.thunk_evaluator import ThunkEvaluator
from tests.factories import (
    Recorder,
    class_decorator,
    decorators,
    getter,
    impl,
    make_accessor,
    make_class,
    make_class_declaration,
    make_literal_accessor,
    make_literal_method,
    make_method,
    member_decorator,
    readonly,
    setter,
    thunk,
)


def dispatcher(config: DesugarConfig | None = None) -> DeclarationDispatcher:
    return DeclarationDispatcher(ThunkEvaluator(), config=config)


class TestBuildInitialValue:
    """Tests for initial fold values per shape."""

    def test_method_default(self) -> None:
        decl = make_method()
        initial = build_initial_value(decl, resolve_target(get_declaration_context(decl)))
        assert initial == PropertyDescriptor(value=impl, enumerable=False, configurable=True, writable=True)

    def test_accessor_default(self) -> None:
        decl = make_accessor()
        initial = build_initial_value(decl, resolve_target(get_declaration_context(decl)))
        assert initial == PropertyDescriptor(get=getter, set=setter, enumerable=True, configurable=True)

    def test_class_is_constructor(self) -> None:
        decl = make_class_declaration()
        assert build_initial_value(decl, resolve_target(get_declaration_context(decl))) is decl.constructor

    def test_literal_without_prior_is_absent(self) -> None:
        decl = make_literal_method()
        assert build_initial_value(decl, resolve_target(get_declaration_context(decl))) is ABSENT

    def test_literal_redefinition_uses_new_implementation(self) -> None:
        """A redefined name folds the new accessor, not the replaced descriptor."""
        literal = PlainObject()
        literal.define_property("value", PropertyDescriptor(value=1, enumerable=True, configurable=True, writable=True))
        decl = make_literal_accessor(literal=literal)
        initial = build_initial_value(decl, resolve_target(get_declaration_context(decl)))
        assert initial == PropertyDescriptor(get=getter, set=setter, enumerable=True, configurable=True)


class TestDispatchMembers:
    """Tests for member dispatch."""

    def test_instance_method_installs_on_prototype(self) -> None:
        foo = make_class()
        recorder = Recorder()
        decl = make_method(owner=foo, decorator_list=decorators(thunk(recorder, "readonly", readonly)))
        result = dispatcher().dispatch(decl, {})

        assert result.installed
        assert result.target.kind is TargetKind.PROTOTYPE
        assert foo.prototype.get_own_property("name").writable is False  # type: ignore[union-attr]
        assert foo.get_own_property("name") is ABSENT

    def test_static_method_installs_on_constructor(self) -> None:
        foo = make_class()
        recorder = Recorder()
        decl = make_method(
            owner=foo, is_static=True, decorator_list=decorators(thunk(recorder, "readonly", readonly))
        )
        result = dispatcher().dispatch(decl, {})

        assert result.target.kind is TargetKind.STATIC
        assert foo.get_own_property("name").writable is False  # type: ignore[union-attr]
        assert foo.prototype.get_own_property("name") is ABSENT

    def test_steps_recorded(self) -> None:
        recorder = Recorder()
        decl = make_method(
            decorator_list=decorators(
                thunk(recorder, "A", member_decorator(recorder, "A")),
                thunk(recorder, "B", member_decorator(recorder, "B")),
            )
        )
        result = dispatcher().dispatch(decl, {})
        assert [(s.kind, s.index) for s in result.steps] == [
            (StepKind.EVALUATE, 0),
            (StepKind.EVALUATE, 1),
            (StepKind.APPLY, 1),
            (StepKind.APPLY, 0),
            (StepKind.INSTALL, None),
        ]
        assert recorder.events == ["eval A", "eval B", "apply B", "apply A"]

    def test_trace_disabled(self) -> None:
        recorder = Recorder()
        decl = make_method(decorator_list=decorators(thunk(recorder, "readonly", readonly)))
        result = dispatcher(DesugarConfig(record_trace=False)).dispatch(decl, {})
        assert result.steps == ()
        assert result.installed

    def test_literal_absent_fold_installs_default(self) -> None:
        """Decorators see ABSENT for a new name, the member is still installed."""
        recorder = Recorder()
        literal = PlainObject()
        decl = make_literal_method(
            literal=literal,
            decorator_list=decorators(thunk(recorder, "spy", member_decorator(recorder, "spy"))),
        )
        result = dispatcher().dispatch(decl, {})

        assert recorder.received == [ABSENT]
        assert result.initial is ABSENT
        assert result.installed
        assert result.steps[-1].kind is StepKind.INSTALL
        assert literal.get_own_property("name") == PropertyDescriptor(
            value=impl, enumerable=False, configurable=True, writable=True
        )
        assert literal.invoke("name") == "impl"

    def test_literal_decorator_returning_absent_installs_default(self) -> None:
        literal = PlainObject()
        decl = make_literal_accessor(
            literal=literal,
            decorator_list=decorators(DecoratorExpression(source="drop", thunk=lambda: lambda o, n, d: ABSENT)),
        )
        dispatcher().dispatch(decl, {})
        assert literal.get("value") == "got"

    def test_class_member_decorator_returning_absent_skips_install(self) -> None:
        foo = make_class()
        decl = make_method(
            owner=foo,
            decorator_list=decorators(DecoratorExpression(source="drop", thunk=lambda: lambda o, n, d: ABSENT)),
        )
        result = dispatcher().dispatch(decl, {})
        assert not result.installed
        assert result.steps[-1].kind is StepKind.SKIP_INSTALL
        assert foo.prototype.get_own_property("name") is ABSENT

    def test_undecorated_bypassed(self) -> None:
        foo = make_class()
        result = dispatcher().dispatch(make_method(owner=foo), {})
        assert result.bypassed
        assert not result.installed
        assert foo.prototype.get_own_property("name") is ABSENT

    def test_malformed_final_installs_nothing(self) -> None:
        foo = make_class()
        decl = make_method(
            owner=foo,
            decorator_list=decorators(DecoratorExpression(source="bad", thunk=lambda: lambda o, n, d: "oops")),
        )
        with pytest.raises(MalformedDescriptorError):
            dispatcher().dispatch(decl, {})
        assert foo.prototype.get_own_property("name") is ABSENT

    def test_evaluation_failure_installs_nothing(self) -> None:
        foo = make_class()

        def failing() -> object:
            raise LookupError("missing")

        decl = make_method(owner=foo, decorator_list=decorators(DecoratorExpression(source="x", thunk=failing)))
        with pytest.raises(EvaluationError):
            dispatcher().dispatch(decl, {})
        assert foo.prototype.get_own_property("name") is ABSENT

    def test_max_decorators(self) -> None:
        recorder = Recorder()
        decl = make_method(
            decorator_list=decorators(thunk(recorder, "A", readonly), thunk(recorder, "B", readonly))
        )
        with pytest.raises(ValueError, match="max is 1"):
            dispatcher(DesugarConfig(max_decorators=1)).dispatch(decl, {})
        assert recorder.events == []

    def test_unknown_declaration_raises(self) -> None:
        with pytest.raises(UnrecognizedDeclarationShapeError):
            dispatcher().dispatch(object(), {})  # type: ignore[arg-type]


class TestDispatchClass:
    """Tests for class dispatch."""

    def test_rebinds_replacement(self) -> None:
        recorder = Recorder()
        replacement = ClassConstructor("Replacement")
        decl = make_class_declaration(
            decorator_list=decorators(thunk(recorder, "swap", class_decorator(recorder, "swap", replacement)))
        )
        environment: dict[str, object] = {}
        result = dispatcher().dispatch(decl, environment)

        assert environment["Foo"] is replacement
        assert result.shape is DeclarationShape.CLASS
        assert result.target.kind is TargetKind.CONSTRUCTOR
        assert result.steps[-1].kind is StepKind.REBIND

    def test_none_keeps_constructor(self) -> None:
        recorder = Recorder()
        decl = make_class_declaration(
            decorator_list=decorators(thunk(recorder, "noop", class_decorator(recorder, "noop")))
        )
        environment: dict[str, object] = {}
        dispatcher().dispatch(decl, environment)
        assert environment["Foo"] is decl.constructor
