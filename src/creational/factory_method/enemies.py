"""Enemies loaded by game levels."""


class Mushroom:
    def attack(self) -> None:
        print("I am Mushroom and I attack!")


class Turtle:
    def attack(self) -> None:
        print("I am Turtle and I attack!")
