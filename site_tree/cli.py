#!/usr/bin/env python3
"""
Точка входа для запуска краулера SiteTree через командную строку.

Команды:
  crawl URL [URL...]  Обойти сайт(ы) и вывести/сохранить дерево страниц
  config              Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда crawl опции:
  --concurrency INT   Макс. число одновременных загрузок (override concurrency)
  --timeout SEC       Таймаут одного запроса (override timeout)
  --crawl-timeout SEC Таймаут всего пакета обходов (override crawl_timeout)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами

Дополнительно:
  --version, -v       Показать версию SiteTree

Пример:
  site_tree crawl https://example.com --concurrency 32 --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from site_tree import __version__
from site_tree.config import CrawlerConfig, load_config
from site_tree.engine import start_crawl
from site_tree.logger import DEFAULT_FORMAT, init_logging
from site_tree.report.html_report import render_html
from site_tree.report.json_report import render_json
from site_tree.report.text_report import render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteTree, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteTree CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seeds', nargs=-1, required=True)
@click.option(
    '--concurrency', '-n', 'concurrency',
    type=int,
    default=None,
    help='Макс. число одновременных загрузок (override concurrency)'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Таймаут одного запроса, секунд (override timeout)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего пакета обходов, секунд (override crawl_timeout)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию встроенная)'
)
@click.pass_context
def crawl(ctx, seeds, concurrency, timeout, crawl_timeout, json_output, html_output, template_dir):
    """Обойти сайт от каждого SEED и вывести дерево страниц."""
    overrides = {
        'concurrency': concurrency,
        'timeout': timeout,
        'crawl_timeout': crawl_timeout,
    }
    try:
        cfg = CrawlerConfig(**{
            **ctx.obj['config'].model_dump(),
            **{k: v for k, v in overrides.items() if v is not None},
        })
    except ValidationError as e:
        print_error(f'Некорректные параметры: {e}')

    try:
        if cfg.crawl_timeout:
            pages = asyncio.run(
                asyncio.wait_for(start_crawl(seeds, cfg), timeout=cfg.crawl_timeout)
            )
        else:
            pages = asyncio.run(start_crawl(seeds, cfg))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {cfg.crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        for page in pages:
            click.echo(render_text(page))
        return

    if json_output:
        try:
            saved_json = render_json(pages, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(pages, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
