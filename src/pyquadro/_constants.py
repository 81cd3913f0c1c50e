"""Internal constants shared across the library."""

DRIVER_NAME = "aquacomputer-quadro"
HWMON_NAME = "quadro"

VENDOR_ID = 0x0C70
PRODUCT_ID = 0xF00D

# The Quadro pushes this report about once per second.
STATUS_REPORT_ID = 0x01
# Two report periods; reads older than this are treated as "no data".
STATUS_UPDATE_INTERVAL: float = 2.0

# ------------------------------------------------------------------
# Status report offsets (byte 0 is the report ID)
# ------------------------------------------------------------------

SERIAL_FIRST_PART = 3
SERIAL_SECOND_PART = 5
FIRMWARE_VERSION = 13
POWER_CYCLES = 24

TEMP1 = 52
TEMP2 = 54
TEMP3 = 56
TEMP4 = 58

FLOW_SPEED = 110
FAN1_SPEED = 120
FAN2_SPEED = 133
FAN3_SPEED = 146
FAN4_SPEED = 159

FAN1_POWER = 118
FAN2_POWER = 131
FAN3_POWER = 144
FAN4_POWER = 157

VCC_VOLTAGE = 108
FAN1_VOLTAGE = 114
FAN2_VOLTAGE = 127
FAN3_VOLTAGE = 140
FAN4_VOLTAGE = 153

FAN1_CURRENT = 116
FAN2_CURRENT = 129
FAN3_CURRENT = 142
FAN4_CURRENT = 155

# ------------------------------------------------------------------
# Channel labels
# ------------------------------------------------------------------

LABEL_TEMPS: tuple[str, ...] = ("Temp1", "Temp2", "Temp3", "Temp4")
LABEL_SPEEDS: tuple[str, ...] = (
    "Flow speed [l/h]",
    "Fan1 speed",
    "Fan2 speed",
    "Fan3 speed",
    "Fan4 speed",
)
LABEL_POWERS: tuple[str, ...] = ("Fan1 power", "Fan2 power", "Fan3 power", "Fan4 power")
LABEL_VOLTAGES: tuple[str, ...] = (
    "VCC",
    "Fan1 voltage",
    "Fan2 voltage",
    "Fan3 voltage",
    "Fan4 voltage",
)
LABEL_CURRENTS: tuple[str, ...] = ("Fan1 current", "Fan2 current", "Fan3 current", "Fan4 current")

# Every exposed attribute is read-only.
READ_ONLY_MODE = 0o444
