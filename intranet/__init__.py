# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Bundespolizei Teamstadt intranet backend."""

__version__ = "0.4.0"
