"""Application services for decorator desugaring.

DeclarationDispatcher is the main entry point; evaluator, composer and
installer are its stages. plan() lowers without executing.
"""

from decorlift.application.services.composer import Composition, CompositionEngine
from decorlift.application.services.dispatcher import DeclarationDispatcher, build_initial_value, build_member_default
from decorlift.application.services.evaluator import DecoratorEvaluator
from decorlift.application.services.installer import Installer
from decorlift.application.services.planner import plan

__all__ = [
    "Composition",
    "CompositionEngine",
    "DeclarationDispatcher",
    "DecoratorEvaluator",
    "Installer",
    "build_initial_value",
    "build_member_default",
    "plan",
]
