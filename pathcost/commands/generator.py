# pathcost/commands/generator.py
from typing import List, Tuple

from pathcost.utils.enums import Heading, Movement
from pathcost.utils.types import SearchState


class CommandGenerator:
    """
    Turns a searched path (start pseudo-state first) into movement commands.

    generate_commands -> absolute segments: ["E2", "N2", "FIN"]
    generate_turns    -> relative form:     ["FW2", "TL", "FW2", "FIN"]
    """

    def segments(self, path: List[SearchState]) -> List[Tuple[Heading, int]]:
        """Collapse consecutive moves with the same heading into (heading, cells)."""
        segments: List[Tuple[Heading, int]] = []
        for i in range(1, len(path)):
            prev = path[i - 1]
            curr = path[i]
            if abs(curr.x - prev.x) + abs(curr.y - prev.y) != 1:
                raise ValueError(f"path is not contiguous between {prev} and {curr}")

            if segments and segments[-1][0] == curr.heading:
                heading, length = segments[-1]
                segments[-1] = (heading, length + 1)
            else:
                segments.append((curr.heading, 1))
        return segments

    def generate_commands(self, path: List[SearchState]) -> List[str]:
        commands = [f"{heading.letter}{length}" for heading, length in self.segments(path)]
        commands.append("FIN")
        return commands

    def generate_turns(self, path: List[SearchState]) -> List[str]:
        commands = []
        prev_heading = None
        for heading, length in self.segments(path):
            if prev_heading is not None:
                if heading == prev_heading.rotate_cw():
                    commands.append(Movement.TURN_CW.value)
                elif heading == prev_heading.rotate_ccw():
                    commands.append(Movement.TURN_CCW.value)
                else:
                    raise ValueError(f"illegal reversal {prev_heading.name} -> {heading.name}")
            commands.append(f"{Movement.STRAIGHT.value}{length}")
            prev_heading = heading
        commands.append("FIN")
        return commands
