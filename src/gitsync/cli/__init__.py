"""Command-line interface for gitsync."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from gitsync import GitSync as GitSync
from gitsync import load_settings as load_settings
from gitsync.cli.app import main as main
from gitsync.cli.commands import export as export_command
from gitsync.cli.commands import import_ as import_command
from gitsync.cli.commands import prefs as prefs_command
from gitsync.cli.commands import setup as setup_command
from gitsync.cli.commands import sync as sync_command
from gitsync.cli.parser import _package_version as _package_version
from gitsync.cli.parser import build_parser as build_parser
from gitsync.cli.prompts import QuestionaryPrompter as QuestionaryPrompter

_run_setup = setup_command.run_setup
_run_export = export_command.run_export
_run_import = import_command.run_import
_run_sync = sync_command.run_sync
_run_prefs = prefs_command.run_prefs

_format_preference = prefs_command.format_preference
