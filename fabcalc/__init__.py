"""FabCalc - engineering calculators for unit conversion and sheet-metal work.

The core subpackage holds the pure formulas and validation rules; the
calculators subpackage wraps them in form state (raw text in, formatted
result out); catalog lists the calculators by id.
"""

from . import core
from . import models
from . import calculators
from . import catalog

__all__ = ['core', 'models', 'calculators', 'catalog']
