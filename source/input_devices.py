# input_devices.py
from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple, Union

import pygame

import config
from keys import InputDevice
from logger import get_logger

log = get_logger("input")

InputEvent = Tuple[InputDevice, int, bool]

# No pygame event carries a negative key code.
UNBOUND = -1


def translate_event(event: pygame.event.Event) -> Optional[InputEvent]:
    """
    Turn a pygame event into (device, code, pressed), or None for events that
    are not key/button transitions.
    """
    if event.type == pygame.KEYDOWN:
        return (InputDevice.KEYBOARD, int(event.key), True)
    if event.type == pygame.KEYUP:
        return (InputDevice.KEYBOARD, int(event.key), False)
    if event.type == pygame.MOUSEBUTTONDOWN:
        return (InputDevice.MOUSE, int(event.button), True)
    if event.type == pygame.MOUSEBUTTONUP:
        return (InputDevice.MOUSE, int(event.button), False)
    return None


def key_name(code: int) -> Optional[str]:
    if code == pygame.K_UNKNOWN or code == UNBOUND:
        return None
    try:
        name = pygame.key.name(code)
    except Exception:
        return None
    return name or None


def resolve_binding(device_name: str, value: Union[str, int]) -> Tuple[InputDevice, int]:
    device = InputDevice(device_name)
    if device is InputDevice.MOUSE:
        return (device, int(value))

    if isinstance(value, int) and not isinstance(value, bool):
        return (device, value)

    try:
        code = int(pygame.key.key_code(str(value)))
    except Exception:
        code = pygame.K_UNKNOWN

    # K_UNKNOWN is a real event code for unmapped keys; never bind to it.
    if code == pygame.K_UNKNOWN:
        log.warning("Unknown key name %r, leaving it unbound", value)
        return (device, UNBOUND)
    return (device, code)


def resolve_bindings(
    bindings: Mapping[str, Tuple[str, Union[str, int]]] = config.KEY_BINDINGS,
) -> Dict[str, Tuple[InputDevice, int]]:
    out: Dict[str, Tuple[InputDevice, int]] = {}
    for action, (device_name, value) in bindings.items():
        out[action] = resolve_binding(device_name, value)
        log.info("Binding %s -> %s:%s", action, device_name, value)
    return out


def apply_key_repeat() -> None:
    if config.KEY_REPEAT_DELAY_MS > 0:
        pygame.key.set_repeat(config.KEY_REPEAT_DELAY_MS, config.KEY_REPEAT_INTERVAL_MS)
    else:
        pygame.key.set_repeat()
