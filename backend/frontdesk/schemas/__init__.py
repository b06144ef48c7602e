"""Pydantic schemas for the front-desk API."""

from frontdesk.schemas.base import *
from frontdesk.schemas.room import *
from frontdesk.schemas.stay import *
from frontdesk.schemas.maintenance import *
from frontdesk.schemas.cashier import *
from frontdesk.schemas.staff import *
from frontdesk.schemas.catalog import *
from frontdesk.schemas.assistant import *
from frontdesk.schemas.reports import *
