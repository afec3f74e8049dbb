# === FILE: robots_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для проверки путей по robots.txt через командную строку.

Команды:
  check     Проверить, разрешены ли пути для указанного User-Agent
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...), перекрывает конфиг
  --log-file PATH     Файл для логов (только stderr, если не указан)

Команда check опции:
  --user-agent, -u NAME  Идентификатор краулера (override user_agent)
  --json PATH            Сохранить JSON-отчёт в файл
  --pretty               Преформатировать JSON-вывод (отступ 2)

Дополнительно:
  --version, -v       Показать версию RobotsScout

Пример:
  robots-scout check robots.txt /private/data "/search?q=1" --user-agent Googlebot --pretty
"""
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click

from robots_scout import __version__, parse
from robots_scout.config import load_config
from robots_scout.errors import DecodeError
from robots_scout.logger import configure as configure_logging
from robots_scout.report import render_json
from robots_scout.robots_txt import RobotsTxt

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _verdict(robots: RobotsTxt, user_agent: str, path: str) -> Dict[str, Any]:
    top = robots.explain(user_agent, path)
    rule: Optional[Dict[str, str]] = None
    if top is not None:
        rule = {'kind': top.rule.name, 'value': top.rule.value}
    return {'path': path, 'allowed': robots.allow(user_agent, path), 'rule': rule}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RobotsScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    help='Уровень логирования (по умолчанию из конфига)'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file):
    """Группа команд RobotsScout CLI."""
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    configure_logging(
        level=(log_level or cfg.log_level).upper(),
        log_file=str(log_file) if log_file else None,
    )
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('paths', nargs=-1, required=True)
@click.option(
    '--user-agent', '-u', 'user_agent',
    default=None,
    help='Идентификатор краулера (override user_agent из конфига)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def check(ctx, robots_file, paths, user_agent, json_output, pretty):
    """Проверить PATHS по файлу ROBOTS_FILE."""
    cfg = ctx.obj['config']
    agent = user_agent or cfg.user_agent
    try:
        robots = parse(robots_file.read_bytes(), min_confidence=cfg.min_confidence)
    except DecodeError as e:
        print_error(f'Не удалось прочитать {robots_file}: {e}')

    results = [_verdict(robots, agent, path) for path in paths]

    if json_output:
        try:
            saved_json = render_json(results, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        return

    indent = 2 if pretty else None
    click.echo(json.dumps(results, ensure_ascii=False, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
