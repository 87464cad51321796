#!/usr/bin/env python3
"""
Basic Usage Example - SOLID Principle Examples

This script runs each of the five examples once and shows:
- Dependency inversion: listing fruit by color through an abstraction
- Liskov substitution: how a Square surprises Rectangle callers
- Interface segregation: shapes that only expose what they support
- Open/closed: plugging new text strategies into a fixed adder
- Single responsibility: one calculator for every country's tax

Run: python examples/basic_usage.py
"""

from solid_app.basket import ColorSearcher, FruitBasket
from solid_app.config import load_config
from solid_app.logging import configure_logging
from solid_app.shapes import liskov, segregated
from solid_app.tax import TaxCalculator, UnitedKingdom, UnitedStates
from solid_app.text import TextAdder, TextAppend, TextInsertAt, TextPrepend


def demo_dependency_inversion() -> None:
    """List red fruit from a basket."""
    print("\n=== Dependency inversion ===")
    basket = FruitBasket()
    basket.add_to_basket("apple", "red")
    basket.add_to_basket("grape", "green")
    basket.add_to_basket("cherry", "red")
    ColorSearcher().list_color(basket, "red")


def demo_liskov_substitution() -> None:
    """Show the same code giving different areas for Rectangle and Square."""
    print("\n=== Liskov substitution (counterexample) ===")
    for shape in (liskov.Rectangle(1, 1), liskov.Square(1)):
        shape.set_width(5)
        shape.set_height(4)
        print(f"{shape!r}: area after set_width(5), set_height(4) = {shape.calculate_area()}")


def demo_interface_segregation(config) -> None:
    """Show segregated shapes sharing only area."""
    print("\n=== Interface segregation ===")
    rect = segregated.Rectangle(3, 4, config.shapes)
    square = segregated.Square(3, config.shapes)
    square.set_length(5)
    print(f"Rectangle 3x4 area: {rect.calculate_area()}")
    print(f"Square length {square.get_length()} area: {square.calculate_area()}")


def demo_open_closed() -> None:
    """Apply several strategies through one adder."""
    print("\n=== Open/closed ===")
    adder = TextAdder()
    for strategy in (TextAppend(), TextPrepend(), TextInsertAt(3)):
        print(f"{strategy!r}: {adder.add_to_text('abcdef', 'XY', strategy)}")


def demo_single_responsibility(config) -> None:
    """Calculate tax for two countries with the same income."""
    print("\n=== Single responsibility ===")
    calculator = TaxCalculator(config.tax)
    for country in (UnitedStates(800), UnitedKingdom(800)):
        print(f"{type(country).__name__} tax on 800: {calculator.calculate_tax(country)}")


def main() -> None:
    configure_logging(level="WARNING")
    config = load_config()

    demo_dependency_inversion()
    demo_liskov_substitution()
    demo_interface_segregation(config)
    demo_open_closed()
    demo_single_responsibility(config)


if __name__ == "__main__":
    main()
