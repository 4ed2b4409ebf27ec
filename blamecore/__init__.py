# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------
