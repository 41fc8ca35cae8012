"""Concrete enemies and collectibles."""


class Mushroom:
    def attack(self) -> None:
        print("Mushroom attacks Mario!")


class Turtle:
    def attack(self) -> None:
        print("Turtle attacks Mario!")


class Coin:
    def collect(self) -> None:
        print("Coin collected!")


class Star:
    def collect(self) -> None:
        print("Star collected!")
