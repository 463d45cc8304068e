# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/patternlab/cli/app.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from patternlab.config.loader import ConfigError, load_config
from patternlab.logging.log import init_logging
from patternlab.observers.console import ConsoleObserver
from patternlab.observers.dispatcher import EventBus
from patternlab.observers.errors import PublishError
from patternlab.observers.events import (
    CoffeeOrdered,
    DemoFailed,
    MessageRelayed,
    ObserverUpdated,
    ShapeDrawn,
    SingletonChecked,
    new_ctx,
)
from patternlab.observers.jsonfile import JsonFileObserver
from patternlab.observers.logger import LoggerObserver
from patternlab.patterns import decorator, factory, mediator, observer
from patternlab.patterns.display import Display
from patternlab.patterns.singleton import AppContext, check_singleton, describe_check


# ------------------------------------------------------------------------------
# CLI setup
# ------------------------------------------------------------------------------

app = typer.Typer(help="patternlab: design pattern demos", no_args_is_help=True)

DEFAULT_DATA = "test data"
DEFAULT_MESSAGE = "Hello from User1!"


@app.callback()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="DEBUG output on the console"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Where run logs are written"),
    events_file: Optional[Path] = typer.Option(None, "--events-file", help="Append events as JSON lines"),
    quiet_events: bool = typer.Option(False, "--quiet-events", help="Do not echo events to the console"),
):
    """Load config, set up logging and the event bus shared by every command."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config")

    logger, run_id, log_path = init_logging(
        base_dir=log_dir or cfg.logging.log_dir,
        verbose=verbose or cfg.logging.verbose,
    )
    logger.debug(f"config={cfg.model_dump()}")

    observers = [LoggerObserver(logger)]
    if cfg.observers.console and not quiet_events:
        observers.append(ConsoleObserver())
    sink = events_file or cfg.observers.events_file
    if sink:
        observers.append(JsonFileObserver(sink))

    AppContext.init(config=cfg, logger=logger, run_id=run_id, bus=EventBus(observers))


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------

def _fail(ctx: AppContext, demo: str, error: Exception) -> None:
    ctx.bus.emit(DemoFailed(demo=demo, error=str(error), **new_ctx(demo, ctx.run_id)))
    raise typer.BadParameter(str(error))


def run_singleton(ctx: AppContext, display: Display) -> str:
    same = check_singleton()
    line = describe_check(same)
    display.set_text("singleton", line)
    ctx.bus.emit(SingletonChecked(same_instance=same, **new_ctx("singleton", ctx.run_id)))
    return line


def run_draw(ctx: AppContext, display: Display, shape: str) -> str:
    try:
        drawn = factory.draw_shape(shape, display)
    except factory.UnknownShapeError as e:
        _fail(ctx, "factory", e)
    ctx.bus.emit(ShapeDrawn(
        shape=drawn.kind,
        css_class=drawn.css_class,
        canvas_size=len(display.canvas),
        **new_ctx("factory", ctx.run_id),
    ))
    return "canvas: " + " ".join(display.canvas)


def run_coffee(ctx: AppContext, display: Display, kind: str) -> str:
    menu = ctx.config.coffee
    try:
        coffee = decorator.order_coffee(kind, menu)
    except decorator.UnknownCoffeeError as e:
        _fail(ctx, "decorator", e)
    line = decorator.describe_cost(coffee, menu)
    display.set_text("coffeeOrder", line)
    ctx.bus.emit(CoffeeOrdered(kind=kind.strip().lower(), cost=coffee.cost(), **new_ctx("decorator", ctx.run_id)))
    return line


def run_observe(ctx: AppContext, display: Display, data: str) -> str:
    try:
        observers, result = observer.run_observer_demo(
            data, display, count=ctx.config.observer_count, policy=ctx.config.error_policy,
        )
    except PublishError as e:
        _fail(ctx, "observer", e)
    ctx.bus.emit(ObserverUpdated(
        data=data,
        observers=[o.name for o in observers],
        failures=len(result.failures),
        **new_ctx("observer", ctx.run_id),
    ))
    return display.text(observer.OUTPUT_SLOT)


def run_mediate(ctx: AppContext, display: Display, message: str) -> str:
    recipients = mediator.send_mediated_message(message, display)
    ctx.bus.emit(MessageRelayed(
        sender="User1",
        recipients=recipients,
        message=message,
        **new_ctx("mediator", ctx.run_id),
    ))
    return display.text(mediator.OUTPUT_SLOT)


# ------------------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------------------

@app.command()
def singleton():
    """Check that two constructions return the same instance."""
    typer.echo(run_singleton(AppContext.get(), Display()))


@app.command()
def draw(shape: str = typer.Argument(..., help="circle or square")):
    """Draw a shape created by the shape factory."""
    typer.echo(run_draw(AppContext.get(), Display(), shape))


@app.command()
def coffee(kind: str = typer.Argument("plain", help="plain or milk")):
    """Order a coffee, optionally decorated with milk."""
    typer.echo(run_coffee(AppContext.get(), Display(), kind))


@app.command()
def observe(data: str = typer.Argument(DEFAULT_DATA, help="Payload to publish")):
    """Publish a payload to the display observers."""
    typer.echo(run_observe(AppContext.get(), Display(), data))


@app.command()
def mediate(message: str = typer.Argument(DEFAULT_MESSAGE, help="Message User1 sends")):
    """Send a message from User1 through the mediator."""
    typer.echo(run_mediate(AppContext.get(), Display(), message))


@app.command("all")
def run_all():
    """Run every demo once, in page order, on a single display."""
    ctx = AppContext.get()
    display = Display()
    typer.echo(run_singleton(ctx, display))
    run_draw(ctx, display, "circle")
    typer.echo(run_draw(ctx, display, "square"))
    typer.echo(run_coffee(ctx, display, "plain"))
    typer.echo(run_coffee(ctx, display, "milk"))
    typer.echo(run_observe(ctx, display, DEFAULT_DATA))
    typer.echo(run_mediate(ctx, display, DEFAULT_MESSAGE))
    ctx.logger.info(f"all demos done run_id={ctx.run_id}")


if __name__ == "__main__":
    app()
