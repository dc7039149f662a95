#
# Copyright (c) 2024-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os


production: bool = int(os.environ.get('PRODUCTION', '0')) != 0


# Upper end of the effective rate chart, in euros
chart_max_value: int = int(os.environ.get('IMT_CHART_MAX_VALUE', '1000000'))


# StatCounter analytics, emitted in production only when both are set
statcounter_project: str|None = os.environ.get('STATCOUNTER_PROJECT') or None
statcounter_security: str|None = os.environ.get('STATCOUNTER_SECURITY') or None


# Source repository, linked from the app menu when set
project_url: str|None = os.environ.get('PROJECT_URL') or None
