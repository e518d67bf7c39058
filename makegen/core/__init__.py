# SPDX-License-Identifier: MIT
"""Target model and source discovery."""
