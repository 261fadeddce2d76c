"""Lesson orchestration.

Each principle has one runner that drives the example classes in either
variant and records what they printed as `LessonStep`s, plus a `complies`
verdict computed from what actually happened. The CLI and the exporters only
consume the resulting `LessonReport`; printing and progress stay out of here.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from adapters.flavor_catalog import load_flavor_catalog
from adapters.payment_gateways import PAYMENT_PROCESSORS, build_payment_processor
from adapters.payment_gateways.formatting import format_amount
from core.config import AppSettings
from core.domain.errors import ShapeOperationNotSupportedError
from core.domain.legacy_shapes import (
    BloatedCuboid,
    BloatedRectangle,
    BloatedSquare,
    MutableRectangle,
    MutableSquare,
)
from core.domain.models import LessonOutcome, LessonReport, PaymentReceipt, Person
from core.domain.principle import Principle, Variant
from core.domain.shapes import Cuboid, Rectangle, Shape, Square
from core.interfaces.shapes import ThreeDimensionalShapeInterface
from core.services.flavors import (
    DEFAULT_FLAVORS,
    FlavorAdder,
    FlavorRegistry,
    IceCreamMaker,
    LegacyIceCreamMaker,
)
from core.services.person import PersonDisplay, PersonValidator, PersonValidatorWithDisplay
from core.services.store import Store, StripeBoundStore

logger = logging.getLogger(__name__)

DEMO_PEOPLE: tuple[tuple[str, int], ...] = (
    ("John Doe", 30),
    ("Bob", 40),
    ("Jane Roe", 16),
)
NEW_FLAVOR = "strawberry"
SQUARE_SIDE = 10
EXPECTED_SQUARE_AREA = SQUARE_SIDE * SQUARE_SIDE
DEMO_COLOR = "red"


@dataclass
class LessonHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None


@dataclass
class LessonRequest:
    """Which lessons to run. `principles=None` means all five."""

    principles: Sequence[Principle] | None = None
    variants: Sequence[Variant] = field(default_factory=Variant.both)


class _Context:
    def __init__(self, settings: AppSettings, hooks: LessonHooks) -> None:
        self.settings = settings
        self.hooks = hooks
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        logger.debug("Lesson warning: %s", message)
        self.warnings.append(message)
        if self.hooks.warning:
            self.hooks.warning(message)


def _mixes_validation_and_display(cls: type) -> bool:
    validates = any(name.startswith("validate") for name in dir(cls))
    return validates and callable(getattr(cls, "display", None))


def _srp(ctx: _Context, variant: Variant) -> LessonOutcome:
    people = [Person(name=name, age=age) for name, age in DEMO_PEOPLE]

    if variant is Variant.VIOLATING:
        outcome = LessonOutcome(
            principle=Principle.SRP,
            variant=variant,
            title="PersonValidatorWithDisplay validates and displays",
            complies=not _mixes_validation_and_display(PersonValidatorWithDisplay),
            note="Changing the output format and changing a validation rule both edit the same class.",
        )
        outputs = []
        for person in people:
            message = PersonValidatorWithDisplay(person.name, person.age).display()
            outputs.append(message)
            outcome.add_step("PersonValidatorWithDisplay", message)
        outcome.observations = {"outputs": outputs, "classes": ["PersonValidatorWithDisplay"]}
        return outcome

    validator = PersonValidator(
        min_name_length=ctx.settings.min_name_length,
        min_age=ctx.settings.min_age,
    )
    classes = (PersonValidator, PersonDisplay)
    outcome = LessonOutcome(
        principle=Principle.SRP,
        variant=variant,
        title="PersonValidator checks, PersonDisplay shows",
        complies=not any(_mixes_validation_and_display(cls) for cls in classes),
    )
    outputs = []
    for person in people:
        outcome.add_step(
            "PersonValidator",
            f"{person.name!r}: name ok={validator.validate_name(person.name)}, "
            f"age ok={validator.validate_age(person.age)}",
            ok=validator.is_valid(person),
        )
        message = PersonDisplay(person, validator).display()
        outputs.append(message)
        outcome.add_step("PersonDisplay", message)
    outcome.observations = {"outputs": outputs, "classes": [cls.__name__ for cls in classes]}
    return outcome


def _ocp(ctx: _Context, variant: Variant) -> LessonOutcome:
    if variant is Variant.VIOLATING:
        outcome = LessonOutcome(
            principle=Principle.OCP,
            variant=variant,
            title="LegacyIceCreamMaker reads a hard-coded flavor list",
            complies=False,
            note=f"Serving {NEW_FLAVOR} requires editing LEGACY_FLAVORS in the source.",
        )
        served: dict[str, bool] = {}
        for flavor in ("chocolate", NEW_FLAVOR):
            served[flavor] = LegacyIceCreamMaker(flavor).make()
            outcome.add_step("LegacyIceCreamMaker", _make_message(flavor, served[flavor]), ok=served[flavor])
        outcome.observations = {"new_flavor_served": served[NEW_FLAVOR]}
        return outcome

    registry = FlavorRegistry()
    seeded = registry.flavors
    outcome = LessonOutcome(
        principle=Principle.OCP,
        variant=variant,
        title="FlavorAdder extends the FlavorRegistry",
        complies=False,
    )

    maker = IceCreamMaker(NEW_FLAVOR, registry)
    served_before = maker.make()
    outcome.add_step("IceCreamMaker", _make_message(NEW_FLAVOR, served_before), ok=served_before)

    FlavorAdder(NEW_FLAVOR, registry).add()
    outcome.add_step("FlavorAdder", f"added {NEW_FLAVOR}")

    served_after = maker.make()
    outcome.add_step("IceCreamMaker", _make_message(NEW_FLAVOR, served_after), ok=served_after)

    catalog_flavors: list[str] = []
    path = ctx.settings.flavors_path
    if path is not None:
        if not path.exists():
            ctx.warn(f"Flavor catalog not found: {path}")
        else:
            catalog_flavors = load_flavor_catalog(path).flavors
            for flavor in catalog_flavors:
                FlavorAdder(flavor, registry).add()
            outcome.add_step("FlavorAdder", f"added {len(catalog_flavors)} flavor(s) from {path.name}")

    untouched = seeded == DEFAULT_FLAVORS and NEW_FLAVOR not in DEFAULT_FLAVORS
    outcome.complies = served_after and untouched
    outcome.observations = {
        "declared_flavors": list(DEFAULT_FLAVORS),
        "registry_flavors": list(registry.flavors),
        "catalog_flavors": catalog_flavors,
        "new_flavor_served": served_after,
        "declaration_untouched": untouched,
    }
    return outcome


def _make_message(flavor: str, served: bool) -> str:
    if served:
        return f"{flavor}: Great success. You now have ice cream."
    return f"{flavor}: Epic fail. No ice cream for you."


def _lsp(ctx: _Context, variant: Variant) -> LessonOutcome:
    if variant is Variant.VIOLATING:
        rectangle = MutableRectangle()
        rectangle.set_width(SQUARE_SIDE)
        rectangle.set_height(5)

        square = MutableSquare()
        square.set_width(SQUARE_SIDE)
        square.set_height(5)
        square_area = square.get_area()

        outcome = LessonOutcome(
            principle=Principle.LSP,
            variant=variant,
            title="MutableSquare overrides the rectangle setters",
            complies=square_area == EXPECTED_SQUARE_AREA,
            note="set_height(5) silently overwrote the width set just before.",
        )
        outcome.add_step("MutableRectangle", f"set_width(10); set_height(5) -> area {rectangle.get_area()}")
        outcome.add_step(
            "MutableSquare",
            f"set_width(10); set_height(5) -> area {square_area} (expected {EXPECTED_SQUARE_AREA})",
            ok=square_area == EXPECTED_SQUARE_AREA,
        )
        outcome.observations = {
            "rectangle_area": rectangle.get_area(),
            "square_area": square_area,
            "expected_square_area": EXPECTED_SQUARE_AREA,
        }
        return outcome

    shape = Shape()
    rectangle = Rectangle()
    square = Square()
    for item in (shape, rectangle, square):
        item.set_color(DEMO_COLOR)
    rectangle.set_width(SQUARE_SIDE)
    rectangle.set_height(5)
    square.set_side(SQUARE_SIDE)
    square_area = square.get_area()
    colors = [item.get_color() for item in (shape, rectangle, square)]

    outcome = LessonOutcome(
        principle=Principle.LSP,
        variant=variant,
        title="Rectangle and Square share only what Shape guarantees",
        complies=square_area == EXPECTED_SQUARE_AREA and colors == [DEMO_COLOR] * 3,
    )
    for item, color in zip((shape, rectangle, square), colors):
        outcome.add_step(item.__class__.__name__, f"get_color() -> {color}", ok=color == DEMO_COLOR)
    outcome.add_step("Rectangle", f"set_width(10); set_height(5) -> area {rectangle.get_area()}")
    outcome.add_step(
        "Square",
        f"set_side(10) -> area {square_area}",
        ok=square_area == EXPECTED_SQUARE_AREA,
    )
    outcome.observations = {
        "rectangle_area": rectangle.get_area(),
        "square_area": square_area,
        "expected_square_area": EXPECTED_SQUARE_AREA,
        "colors": colors,
    }
    return outcome


def _isp(ctx: _Context, variant: Variant) -> LessonOutcome:
    if variant is Variant.VIOLATING:
        shapes: list[object] = [BloatedSquare(10), BloatedRectangle(10, 5), BloatedCuboid(2, 3, 4)]
        title = "Every shape implements FatShapeInterface"
    else:
        shapes = [Square(10), Rectangle(10, 5), Cuboid(2, 3, 4)]
        title = "Flat shapes implement ShapeInterface, Cuboid the 3D interface"

    outcome = LessonOutcome(principle=Principle.ISP, variant=variant, title=title, complies=False)
    forced: list[str] = []
    for shape in shapes:
        name = shape.__class__.__name__
        outcome.add_step(name, f"calculate_area() -> {shape.calculate_area()}")
        if not isinstance(shape, ThreeDimensionalShapeInterface):
            continue
        try:
            volume = shape.calculate_volume()
        except ShapeOperationNotSupportedError as exc:
            forced.append(name)
            outcome.add_step(name, f"calculate_volume() -> {exc.message}", ok=False)
        else:
            outcome.add_step(name, f"calculate_volume() -> {volume}", ok=True)

    outcome.complies = not forced
    if forced:
        outcome.note = f"Forced to implement calculate_volume(): {', '.join(forced)}."
    outcome.observations = {"forced_implementations": forced}
    return outcome


def _receipt_message(receipt: PaymentReceipt) -> str:
    return f"{receipt.user} made payment of {format_amount(receipt.amount)}"


def _purchases(store: Store | StripeBoundStore) -> list[PaymentReceipt]:
    return [store.purchase_book(2, 10), store.purchase_course(1, 15)]


def _dip(ctx: _Context, variant: Variant) -> LessonOutcome:
    customer = ctx.settings.customer_name

    if variant is Variant.VIOLATING:
        store = StripeBoundStore(customer)
        receipts = _purchases(store)
        swappable = "payment_processor" in inspect.signature(StripeBoundStore).parameters
        outcome = LessonOutcome(
            principle=Principle.DIP,
            variant=variant,
            title="StripeBoundStore creates its own Stripe client",
            complies=swappable,
            note="Switching to PayPal means editing StripeBoundStore.",
        )
        for receipt in receipts:
            outcome.add_step("Stripe", _receipt_message(receipt))
        outcome.observations = {"gateways": sorted({r.gateway for r in receipts})}
        return outcome

    primary = ctx.settings.payment_gateway
    gateways = [primary] + [name for name in PAYMENT_PROCESSORS if name != primary]

    outcome = LessonOutcome(
        principle=Principle.DIP,
        variant=variant,
        title="Store depends on the PaymentProcessor abstraction",
        complies=False,
    )
    served: list[str] = []
    store_classes: set[str] = set()
    for gateway in gateways:
        processor = build_payment_processor(gateway, customer)
        store = Store(processor)
        store_classes.add(type(store).__name__)
        outcome.add_step("Store", f"wired to {type(processor).__name__}")
        receipts = _purchases(store)
        for receipt in receipts:
            outcome.add_step(receipt.gateway, _receipt_message(receipt), ok=receipt.gateway == gateway)
        if all(r.gateway == gateway for r in receipts):
            served.append(gateway)

    outcome.complies = served == gateways and store_classes == {"Store"}
    outcome.observations = {"gateways": served, "store_classes": sorted(store_classes)}
    return outcome


_RUNNERS: dict[Principle, Callable[[_Context, Variant], LessonOutcome]] = {
    Principle.SRP: _srp,
    Principle.OCP: _ocp,
    Principle.LSP: _lsp,
    Principle.ISP: _isp,
    Principle.DIP: _dip,
}


def run_lesson(
    principle: Principle,
    variant: Variant,
    *,
    settings: AppSettings,
    hooks: LessonHooks | None = None,
) -> LessonOutcome:
    ctx = _Context(settings, hooks or LessonHooks())
    return _RUNNERS[principle](ctx, variant)


def run_lessons(
    *,
    settings: AppSettings,
    request: LessonRequest | None = None,
    hooks: LessonHooks | None = None,
) -> LessonReport:
    request = request or LessonRequest()
    ctx = _Context(settings, hooks or LessonHooks())

    selected = set(request.principles) if request.principles else set(Principle)
    variants = [v for v in Variant if v in set(request.variants)]

    outcomes: list[LessonOutcome] = []
    for principle in Principle:
        if principle not in selected:
            continue
        for variant in variants:
            logger.debug("Running %s (%s)", principle.acronym, variant.value)
            outcomes.append(_RUNNERS[principle](ctx, variant))

    return LessonReport(
        customer=settings.customer_name,
        outcomes=outcomes,
        warnings=ctx.warnings,
    )
