"""Entity and patch types for the Highland Games site."""
from .event import Event, EventPatch
from .slide import Slide, SlidePatch
from .heritage import HeritageItem, HeritagePatch
from .registration import Registration
from .account import User, Admin
