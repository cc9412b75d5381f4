"""CHIP-8 system instructions (0x0xxx)."""

from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm import display
from chip8vm.stack import pop


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00E0 - Clear display."""
    return state.replace(display=display.clear(state.display))


def execute_return(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack)
    return state.replace(stack=stack, pc=address)
