"""Command-line interface for LED locator package."""

import click
import numpy as np
from typing import Optional

from ..core.locator import LedLocator
from ..core.packet_builder import encode, decode, format_frame
from ..config.settings import Settings
from ..models.data_models import ScanResult
from ..services.scanner_service import ConsoleScanSource, SerialScanSource
from ..exceptions.custom_exceptions import LocatorError, ConfigurationError
from ..utils.logging_utils import setup_logger


@click.group()
@click.version_option(package_name="ledlocator")
@click.option('--log-level', default='INFO', help='Logging level (DEBUG, INFO, WARNING, ERROR)')
@click.pass_context
def main(ctx, log_level):
    """LED Locator CLI - scan-driven warehouse indicator control."""
    ctx.ensure_object(dict)
    ctx.obj['log_level'] = log_level

    setup_logger('ledlocator', log_level)


def _load_settings(ctx) -> Settings:
    settings = Settings()
    settings.log_level = ctx.obj.get('log_level', settings.log_level)
    return settings


def _echo_result(result: ScanResult) -> None:
    if result.is_error:
        click.echo(f"❌ {result.message}", err=True)
    else:
        click.echo(f"✅ {result.message}")


@main.command()
@click.option('--serial-port', '-p', help='Read scans from a serial scanner instead of stdin')
@click.pass_context
def run(ctx, serial_port: Optional[str]):
    """Process scans until the exit token or end of input."""
    try:
        settings = _load_settings(ctx)
        locator = LedLocator(settings)

        port = serial_port or settings.scanner_port
        if port:
            source = SerialScanSource(port, settings.scanner_baud, settings.scanner_timeout)
        else:
            source = ConsoleScanSource()

        click.echo("📦 LED Locator - Ready to scan")
        click.echo(f"Scan a product then a tag to import, a tag to export. "
                   f"'{settings.confirm_token}' confirms, '{settings.exit_token}' quits.")

        try:
            results = locator.run(source.lines(), on_result=_echo_result)
        finally:
            source.close()

        click.echo(f"\n👋 Stopped after {len(results)} scans")

    except (LocatorError, ValueError) as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()


@main.command('open-door')
@click.option('--door', '-d', type=int, default=None, help='Door number (defaults to DOOR_NUMBER)')
@click.pass_context
def open_door(ctx, door: Optional[int]):
    """Send one open-door command to test connectivity."""
    try:
        settings = _load_settings(ctx)
        locator = LedLocator(settings)

        click.echo(f"🔍 Sending open-door to {settings.board_ip}:{settings.board_port} "
                   f"(SN {settings.board_serial})...")
        locator.open_door(door)
        click.echo("✅ Command sent. Check the indicator on the board.")

    except (LocatorError, ValueError) as e:
        click.echo(f"❌ Connectivity test failed: {e}", err=True)
        click.echo("Check that the board IP is reachable and the firewall allows UDP.", err=True)
        raise click.Abort()


@main.command()
@click.argument('indicator', type=int)
@click.pass_context
def activate(ctx, indicator: int):
    """Send one activate command for INDICATOR."""
    try:
        locator = LedLocator(_load_settings(ctx))
        frame = locator.activate(indicator)
        click.echo(f"✅ Indicator {indicator} activated (sequence {decode(frame)['sequence_number']})")
    except (LocatorError, ValueError) as e:
        click.echo(f"❌ Activate failed: {e}", err=True)
        raise click.Abort()


@main.command()
@click.argument('product')
@click.pass_context
def locate(ctx, product: str):
    """Light the indicator of PRODUCT once, without a tag."""
    try:
        locator = LedLocator(_load_settings(ctx))
        indicator = locator.locate_product(product)
        click.echo(f"📍 Product {product} is at indicator {indicator}")
    except (LocatorError, ValueError) as e:
        click.echo(f"❌ Locate failed: {e}", err=True)
        raise click.Abort()


@main.command('beacon-check')
@click.argument('indicator', type=int)
@click.option('--seconds', '-s', type=float, default=3.0, help='How long to run the beacon')
@click.pass_context
def beacon_check(ctx, indicator: int, seconds: float):
    """Run the locate beacon on INDICATOR and report its cadence."""
    try:
        settings = _load_settings(ctx)
        locator = LedLocator(settings)

        click.echo(f"💡 Beaconing indicator {indicator} for {seconds:.1f}s...")
        timestamps = locator.check_beacon(indicator, seconds)

        click.echo(f"📊 Frames sent: {len(timestamps)}")
        if len(timestamps) < 2:
            click.echo("⚠️  Not enough frames to measure cadence")
            return

        intervals = np.diff(np.array(timestamps))
        mean_interval = float(np.mean(intervals))
        std_interval = float(np.std(intervals))

        click.echo(f"⏱️  Mean interval: {mean_interval * 1000:.1f}ms "
                   f"(configured {settings.beacon_interval * 1000:.0f}ms)")
        click.echo(f"📊 Jitter (std): {std_interval * 1000:.1f}ms")

        if abs(mean_interval - settings.beacon_interval) > settings.beacon_interval * 0.2:
            click.echo("⚠️  Cadence off by more than 20% - check host load")

    except (LocatorError, ValueError) as e:
        click.echo(f"❌ Beacon check failed: {e}", err=True)
        raise click.Abort()


@main.command('frame-dump')
@click.argument('indicator', type=int)
@click.option('--sequence', type=int, default=1, help='Sequence number to encode')
@click.pass_context
def frame_dump(ctx, indicator: int, sequence: int):
    """Print the frame that would activate INDICATOR (nothing is sent)."""
    try:
        settings = _load_settings(ctx)
        frame = encode(settings.get_board_identity(), settings.door_number, indicator,
                       sequence, settings.activate_duration)

        for offset in range(0, len(frame), 16):
            click.echo(f"{offset:02d}: {format_frame(frame[offset:offset + 16])}")

        for field, value in decode(frame).items():
            click.echo(f"{field}: {value}")

    except (LocatorError, ValueError) as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()


@main.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""
    try:
        click.echo("⚙️  LED Locator Configuration")
        click.echo("=" * 50)

        settings = _load_settings(ctx)

        click.echo(f"Board IP: {settings.board_ip}")
        click.echo(f"Board Port: {settings.board_port}")
        click.echo(f"Board Serial: {settings.board_serial} (0x{settings.board_serial:08X})")
        click.echo(f"Door Number: {settings.door_number}")
        click.echo(f"Activate Duration: {settings.activate_duration}")
        click.echo(f"OFF Policy: {settings.off_policy_name}")
        click.echo(f"Log Level: {settings.log_level}")

        click.echo("\n💡 Beacon:")
        click.echo(f"Interval: {settings.beacon_interval}s")
        click.echo(f"Stop Timeout: {settings.beacon_stop_timeout}s")

        click.echo("\n📦 Products:")
        for product_id, indicator in sorted(settings.product_indicators.items()):
            click.echo(f"{product_id}: indicator {indicator}")

        click.echo("\n🔤 Tokens:")
        click.echo(f"Product Prefix: {settings.product_prefix}")
        click.echo(f"Confirm: {settings.confirm_token}")
        click.echo(f"Exit: {settings.exit_token}")
        click.echo(f"Scanner Port: {settings.scanner_port or 'stdin'}")

    except (LocatorError, ValueError) as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        raise click.Abort()


@main.command('validate-config')
@click.pass_context
def validate_config(ctx):
    """Validate current configuration."""
    try:
        click.echo("🔍 Validating Configuration...")

        settings = _load_settings(ctx)
        settings.validate_settings()

        click.echo("✅ Configuration validation passed")

        click.echo(f"📡 Commands will be sent to {settings.board_ip}:{settings.board_port}")

    except (ConfigurationError, ValueError) as e:
        click.echo(f"❌ Configuration validation failed: {e}", err=True)
        click.echo("🛑 Fix configuration before running the locator", err=True)
        raise click.Abort()


if __name__ == '__main__':
    main()
