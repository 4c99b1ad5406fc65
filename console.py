"""
Terminal helpers: headers, screen clearing and the cosmetic pacing
(pauses, typewriter text). Pacing never changes game state, so every
helper degrades to a plain print when its delay is 0.
"""

import time

import click


def print_header(title: str):
    click.echo("\n" + title)
    click.echo("=" * len(title))


def clear_screen(enabled: bool = True):
    if enabled:
        click.clear()


def pause(seconds: float):
    if seconds > 0:
        time.sleep(seconds)


def type_text(text: str, delay: float = 0.05):
    if delay <= 0:
        click.echo(text)
        return
    for char in text:
        click.echo(char, nl=False)
        time.sleep(delay)
    click.echo()


def echo_lines(lines, indent: str = ""):
    for line in lines:
        click.echo(indent + line)
