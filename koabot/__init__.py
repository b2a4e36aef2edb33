"""Koabot - учет операций ресторана: разбор строк приемок, списаний и производства."""

import sys
from pathlib import Path

# Добавляем корень проекта в sys.path для импортов config/ и contracts/
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
