# SPDX-License-Identifier: MIT
"""Prompt defaults and program lookup."""
