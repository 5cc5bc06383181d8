# SPDX-License-Identifier: Apache-2.0
#
# Copyright (c) 2024-2025 DatePick Contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Application-wide constants for DatePick.

This module contains constants used across multiple modules to avoid
hardcoded values throughout the codebase.
"""

# ============================================================================
# Application Constants
# ============================================================================

APP_NAME = "DatePick"
LOG_SEPARATOR_LENGTH = 60  # characters for "=" * 60

# ============================================================================
# Logging Constants
# ============================================================================

LOG_FILE_NAME = "datepick.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB log file size
LOG_FILE_BACKUP_COUNT = 5  # Number of backup log files
DEFAULT_LOG_LINES_TO_READ = 100  # Default number of recent log lines
LOG_ENV_VAR = "DATEPICK_ENV"

# ============================================================================
# Date Picker Configuration Limits
# ============================================================================

# Bounds accepted for date_picker.years_ahead / years_back
MAX_YEAR_SPAN = 200

# Bounds accepted for date_picker.year_row_height (px)
MIN_YEAR_ROW_HEIGHT = 12
MAX_YEAR_ROW_HEIGHT = 96

# ============================================================================
# Theme Constants
# ============================================================================

# Stylesheets shipped under ui/resources/themes
THEMES = ("light", "dark")
SYSTEM_THEME = "system"
VALID_THEME_SETTINGS = THEMES + (SYSTEM_THEME,)
DEFAULT_THEME = "light"
