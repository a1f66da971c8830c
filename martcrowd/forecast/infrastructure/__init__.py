"""
Infrastructure module initialization.
"""
from .holidays import NeverHolidayCalendar, FixedHolidayCalendar
from .regions import Coordinates, RegionDirectory
from .stores import Store, StoreCatalog
