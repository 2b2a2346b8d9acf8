from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MachineState:
    tape: bytearray = field(default_factory=lambda: bytearray(1))
    cursor: int = 0

    def reset(self) -> None:
        self.tape = bytearray(1)
        self.cursor = 0

    @property
    def current(self) -> int:
        return self.tape[self.cursor]

    @current.setter
    def current(self, value: int) -> None:
        self.tape[self.cursor] = value & 0xFF
