# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Allow ``python -m genro_htmless``."""

from .cli import main

main()
