import click
from typing import Optional, TextIO
from .config import RuntimeFeesConfig, default_fees_config, load_fees_config_json, fees_config_to_json
from .fee import InvalidFeesConfig


@click.group()
def cli():
    """runtime-fees - fee schedule of the sharded runtime
    """


def _load(config_file: Optional[TextIO]) -> RuntimeFeesConfig:
    if config_file is None:
        return default_fees_config()
    try:
        return load_fees_config_json(config_file)
    except InvalidFeesConfig as e:
        raise click.ClickException("invalid fees config %s: %s" % (config_file.name, e))


@cli.command()
@click.option('--free', is_flag=True, help="Show the schedule that charges nothing")
def show(free: bool):
    """Print the default fee schedule as JSON"""
    config = RuntimeFeesConfig.free() if free else default_fees_config()
    click.echo(fees_config_to_json(config))


@cli.command()
@click.argument('config_file', type=click.File('rt'))
def check(config_file: TextIO):
    """Validate a JSON fee schedule

    CONFIG_FILE json-encoded fee schedule, with the same fields as the output of 'show'
    """
    config = _load(config_file)
    click.echo("data receipt min send and exec fee: %d" % config.data_receipt_min_send_and_exec_fee())
    click.echo("min receipt with function call gas: %d" % config.min_receipt_with_function_call_gas())
    click.echo("fees config is valid")


@cli.command()
@click.argument('config_file', type=click.File('rt'), required=False)
def min_receipt_gas(config_file: Optional[TextIO]):
    """Print the minimum gas to create and execute a receipt with a function call"""
    config = _load(config_file)
    click.echo("%d" % config.min_receipt_with_function_call_gas())
