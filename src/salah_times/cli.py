"""Command-line interface for Salah Times."""

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date, datetime, timedelta
from pathlib import Path

from salah_times import __version__
from salah_times.config import LOG_LEVELS, AppConfig, get_config, setup_logging
from salah_times.domain.models import AsrConvention, CalculationMethod


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="salah-times",
        description="Namaz vakitleri ve cemaat saatleri",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"salah-times {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Komutlar")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Web sunucusunu başlat")
    serve_parser.add_argument(
        "--host",
        "-H",
        help="Sunucu adresi (varsayılan: SALAH_TIMES_HOST veya 0.0.0.0)",
    )
    serve_parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="Sunucu portu (varsayılan: SALAH_TIMES_PORT veya 8080)",
    )
    serve_parser.add_argument(
        "--settings",
        "-s",
        type=Path,
        help="Ayar dosyası yolu (varsayılan: SALAH_TIMES_SETTINGS_PATH)",
    )
    serve_parser.add_argument(
        "--default-tz",
        help="Şehir bulunamazsa kullanılacak timezone (SALAH_TIMES_DEFAULT_TIMEZONE)",
    )
    serve_parser.add_argument(
        "--log-level",
        "-l",
        choices=list(LOG_LEVELS),
        help="Log seviyesi (varsayılan: SALAH_TIMES_LOG_LEVEL veya INFO)",
    )

    # times command
    times_parser = subparsers.add_parser("times", help="Namaz vakitlerini göster")
    times_parser.add_argument(
        "--city",
        "-c",
        help='Şehir ("Karachi, Pakistan" veya "Karachi")',
    )
    times_parser.add_argument("--lat", type=float, help="Enlem")
    times_parser.add_argument("--lng", type=float, help="Boylam")
    times_parser.add_argument(
        "--tz",
        help="IANA timezone (verilmezse koordinatlardan bulunur)",
    )
    times_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="Başlangıç tarihi, YYYY-MM-DD (varsayılan: bugün)",
    )
    times_parser.add_argument(
        "--days",
        "-d",
        type=int,
        default=1,
        help="Kaç günlük (varsayılan: 1)",
    )
    times_parser.add_argument(
        "--method",
        "-m",
        choices=[m.value for m in CalculationMethod],
        default=CalculationMethod.MWL.value,
        help="Hesaplama metodu (varsayılan: mwl)",
    )
    times_parser.add_argument(
        "--asr",
        choices=[a.value for a in AsrConvention],
        default=AsrConvention.STANDARD.value,
        help="İkindi kuralı (varsayılan: standard)",
    )
    times_parser.add_argument(
        "--rules",
        "-r",
        default="",
        help='Cemaat kuralları, ör. "Fajr:O:20|Jumuah:F:1,30,PM"',
    )

    return parser


def serve_config(args: argparse.Namespace) -> AppConfig:
    """Ortam değişkenlerinden gelen ayarları komut satırı bayraklarıyla birleştir."""
    config = get_config()
    overrides = {
        "host": args.host,
        "port": args.port,
        "settings_path": args.settings,
        "default_timezone": args.default_tz,
        "log_level": args.log_level,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the web server."""
    import uvicorn

    from salah_times.api.app import create_app

    config = serve_config(args)
    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(f"Ayar dosyası: {config.settings_path}")
    logger.info(f"Varsayılan timezone: {config.default_timezone}")

    app = create_app(
        settings_path=config.settings_path,
        default_timezone=config.default_timezone,
    )

    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def cmd_times(args: argparse.Namespace) -> int:
    """Show prayer and jamaat times."""
    from salah_times.domain.models import GeoLocation
    from salah_times.domain.rules import JamaatRuleSet
    from salah_times.infrastructure.city_directory import StaticCityResolver
    from salah_times.services.prayer_service import PrayerService

    resolver = StaticCityResolver()
    try:
        if args.lat is not None and args.lng is not None:
            if args.tz:
                location = GeoLocation(latitude=args.lat, longitude=args.lng, timezone=args.tz)
            else:
                location = resolver.resolve_coordinates(args.lat, args.lng)
        elif args.city:
            location = resolver.resolve(args.city)
        else:
            print("❌ --city veya --lat/--lng gerekli.", file=sys.stderr)
            return 2
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    service = PrayerService(
        location,
        method=CalculationMethod(args.method),
        asr_convention=AsrConvention(args.asr),
        jamaat_rules=JamaatRuleSet.parse(args.rules),
    )
    start = args.date or datetime.now(service.timezone).date()

    coords = f"{location.latitude:.4f}, {location.longitude:.4f}"
    print(f"\n📍 Konum: {location.label or '-'} ({coords})")
    print(f"🌍 Timezone: {service.timezone_name}")
    print(f"🧭 Metot: {service.method.display_name}")
    print(f"☀️ İkindi: {service.asr_convention.display_name}")
    print(f"🕌 Cemaat: {service.jamaat_rules.format()}")
    print()

    header = f"{'Tarih':<12}" + "".join(
        f"{name:>15}" for name in ("Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha")
    )
    print("=" * len(header))
    print(header)
    print("-" * len(header))

    for offset in range(args.days):
        schedule = service.daily_schedule(start + timedelta(days=offset))
        cells = []
        for entry in schedule.entries():
            cell = entry.start.strftime("%H:%M")
            if entry.jamaat is not None:
                marker = "J" if entry.name == "jumuah" else ""
                cell += f" ({marker}{entry.jamaat.strftime('%H:%M')})"
            cells.append(f"{cell:>15}")
        print(f"{schedule.date.strftime('%d.%m.%Y'):<12}" + "".join(cells))

    print("=" * len(header))
    print("(parantez içinde cemaat saati, J = Jumu'ah)")
    return 0


def main() -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "serve":
        cmd_serve(args)
        return 0
    if args.command == "times":
        return cmd_times(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
