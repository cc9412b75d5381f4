"""
CHIP-8 emulator frontend: pygame window or headless run, configured with Hydra.
"""

import sys
import time

import hydra
import numpy as np
import pygame
from omegaconf import DictConfig, OmegaConf

from chip8vm import Chip8Error, SCREEN_WIDTH, SCREEN_HEIGHT
from chip8vm import step, render, display_dirty, set_key
from chip8vm.logging import ConsoleLogger
from chip8vm.rendering import create_rgba_scheme, display_to_text
from chip8vm.runner import TimerClock, boot, report_fatal, run_steps

# 4x4 host layout 1234/QWER/ASDF/ZXCV -> CHIP-8 keypad
KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}


def run_window(state, cfg, logger):
    """Main emulator loop."""
    scale = cfg["scale"]
    on_color, off_color = create_rgba_scheme(cfg["color_scheme"])
    timer_clock = TimerClock(cfg["timer_hz"]) if cfg["timer_hz"] > 0 else None
    buffer = np.zeros(SCREEN_WIDTH * SCREEN_HEIGHT * 4, dtype=np.uint8)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale))
    pygame.display.set_caption("CHIP-8")

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key in KEY_MAP:
                    state = set_key(state, KEY_MAP[event.key], event.type == pygame.KEYDOWN)

            state = step(state, tick_timers=timer_clock is None)
            if timer_clock is not None:
                state = timer_clock.apply(state)

            if display_dirty(state):
                state = render(state, buffer, on_color, off_color)
                frame = pygame.image.frombuffer(buffer.tobytes(), (SCREEN_WIDTH, SCREEN_HEIGHT), "RGBA")
                screen.blit(pygame.transform.scale(frame, screen.get_size()), (0, 0))
                pygame.display.flip()

            time.sleep(cfg["tick_interval"])
    finally:
        pygame.quit()
    logger.info("Window closed")
    return state


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    cfg = OmegaConf.to_container(cfg)
    logger = ConsoleLogger(log_level=cfg["log_level"])

    try:
        state = boot(cfg["rom"], seed=cfg["seed"])
    except Chip8Error as e:
        sys.exit(report_fatal(e, logger))
    logger.info(f"Loaded: {cfg['rom']}")

    try:
        if cfg["headless_steps"] > 0:
            state = run_steps(state, cfg["headless_steps"], progress=True, logger=logger)
            print(display_to_text(state.display))
        else:
            state = run_window(state, cfg, logger)
    except Chip8Error as e:
        sys.exit(report_fatal(e, logger))

    logger.info(f"Stopped at PC=0x{int(state.pc):03X}")


if __name__ == "__main__":
    main()
