# main.py
from __future__ import annotations

import pygame

import config
import input_devices
import video
from dispatcher import Dispatcher
from keyset import build_default_keyset
from logger import setup_logger
from render import FontCache, RateMeter, draw_instructions
from util import now_ms


def main() -> None:
    log = setup_logger()
    log.info("%s v%s starting", config.TITLE, config.VERSION)

    pygame.init()
    pygame.display.set_caption(config.TITLE)

    screen = video.apply_display_mode((config.WINDOW_W, config.WINDOW_H))
    input_devices.apply_key_repeat()

    keyset = build_default_keyset(input_devices.resolve_bindings(config.KEY_BINDINGS))
    dispatcher = Dispatcher(keyset, clock=now_ms)

    fonts = FontCache()
    clock = pygame.time.Clock()
    frame_meter = RateMeter()
    shown_fps = -1

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue

            if event.type == pygame.VIDEORESIZE:
                screen = video.apply_display_mode((event.w, event.h))
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
                continue

            translated = input_devices.translate_event(event)
            if translated is not None:
                device, code, pressed = translated
                dispatcher.on_input(device, code, pressed)

        win_w, win_h = screen.get_size()
        screen.fill(config.BG_COLOR)
        draw_instructions(screen, fonts, keyset.render(win_w, win_h, now_ms(), input_devices.key_name))
        pygame.display.flip()

        frame_meter.tick()
        fps = int(round(frame_meter.value))
        if fps != shown_fps:
            shown_fps = fps
            pygame.display.set_caption(f"{config.TITLE}   {fps} FPS")

        clock.tick(config.TARGET_FPS)

    log.info("Shutting down")
    pygame.quit()


if __name__ == "__main__":
    main()
