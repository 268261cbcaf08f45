"""Manufacturer handlers.

One handler per manufacturer, grouped into modules by product focus. Every handler
subclasses ManufacturerHandler and is registered by the catalog.
"""

from .base import ManufacturerHandler
from .ti import TIHandler
from .st import STHandler
from .microcontrollers import (
    MicrochipHandler,
    AtmelHandler,
    RenesasHandler,
    NXPHandler,
    CypressHandler,
    SiliconLabsHandler,
    EspressifHandler,
    NordicHandler,
    NuvotonHandler,
    WCHHandler,
    GigaDeviceHandler,
    ArteryHandler,
    HoltekHandler,
)
from .discretes import (
    InfineonHandler,
    VishayHandler,
    OnsemiHandler,
    DiodesIncHandler,
    NexperiaHandler,
    AlphaOmegaHandler,
    LittelfuseHandler,
)
from .analog import (
    AnalogDevicesHandler,
    MaximHandler,
    RohmHandler,
    ToshibaHandler,
    FTDIHandler,
    TrinamicHandler,
    BroadcomHandler,
)
from .passives import (
    YageoHandler,
    PanasonicHandler,
    BournsHandler,
    KemetHandler,
    MurataHandler,
    TDKHandler,
    SamsungHandler,
    AVXHandler,
    NichiconHandler,
    EpsonHandler,
    AbraconHandler,
    NDKHandler,
)
from .memory import WinbondHandler, MicronHandler, ISSIHandler, MacronixHandler
from .connectors import WurthHandler, MolexHandler, TEHandler, JSTHandler, HiroseHandler
from .optoelectronics import CreeHandler, OsramHandler, LumiledsHandler, KingbrightHandler
from .sensors import AllegroHandler, BoschHandler, MelexisHandler, InvenSenseHandler, SensirionHandler, AKMHandler

__all__ = [
    "ManufacturerHandler",
    "TIHandler",
    "STHandler",
    "MicrochipHandler",
    "AtmelHandler",
    "RenesasHandler",
    "NXPHandler",
    "CypressHandler",
    "SiliconLabsHandler",
    "EspressifHandler",
    "NordicHandler",
    "NuvotonHandler",
    "WCHHandler",
    "GigaDeviceHandler",
    "ArteryHandler",
    "HoltekHandler",
    "InfineonHandler",
    "VishayHandler",
    "OnsemiHandler",
    "DiodesIncHandler",
    "NexperiaHandler",
    "AlphaOmegaHandler",
    "LittelfuseHandler",
    "AnalogDevicesHandler",
    "MaximHandler",
    "RohmHandler",
    "ToshibaHandler",
    "FTDIHandler",
    "TrinamicHandler",
    "BroadcomHandler",
    "YageoHandler",
    "PanasonicHandler",
    "BournsHandler",
    "KemetHandler",
    "MurataHandler",
    "TDKHandler",
    "SamsungHandler",
    "AVXHandler",
    "NichiconHandler",
    "EpsonHandler",
    "AbraconHandler",
    "NDKHandler",
    "WinbondHandler",
    "MicronHandler",
    "ISSIHandler",
    "MacronixHandler",
    "WurthHandler",
    "MolexHandler",
    "TEHandler",
    "JSTHandler",
    "HiroseHandler",
    "CreeHandler",
    "OsramHandler",
    "LumiledsHandler",
    "KingbrightHandler",
    "AllegroHandler",
    "BoschHandler",
    "MelexisHandler",
    "InvenSenseHandler",
    "SensirionHandler",
    "AKMHandler",
]
