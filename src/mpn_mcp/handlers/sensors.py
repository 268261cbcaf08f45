"""Handlers for sensor vendors."""

from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler


class AllegroHandler(ManufacturerHandler):
    key = "allegro"

    PATTERNS = {
        CT.MAGNETIC_SENSOR_ALLEGRO: (
            r"A1[0-9]{3}[A-Z0-9-]*",
            r"A3[0-9]{3}[A-Z0-9-]*",
            r"ATS[0-9]{3}[A-Z0-9-]*",
            r"APS[0-9]{5}[A-Z0-9-]*",
        ),
        CT.CURRENT_SENSOR_ALLEGRO: (
            r"ACS7[0-9]{2}[A-Z0-9-]*",
        ),
        CT.MOTOR_DRIVER: (
            r"A49[0-9]{2}[A-Z0-9-]*",
            r"A59[0-9]{2}[A-Z0-9-]*",
        ),
    }


class BoschHandler(ManufacturerHandler):
    key = "bosch"

    PATTERNS = {
        CT.PRESSURE_SENSOR_BOSCH: (
            r"BM[EP][0-9]{3}[A-Z0-9-]*",
        ),
        CT.ACCELEROMETER: (
            r"BMA[0-9]{3}[A-Z0-9-]*",
        ),
        CT.IMU: (
            r"BM[IX][0-9]{3}[A-Z0-9-]*",
            r"BNO0[0-9]{2}[A-Z0-9-]*",
        ),
        CT.MAGNETIC_SENSOR: (
            r"BMM[0-9]{3}[A-Z0-9-]*",
        ),
        CT.GYROSCOPE: (
            r"BMG[0-9]{3}[A-Z0-9-]*",
        ),
    }


class MelexisHandler(ManufacturerHandler):
    key = "melexis"

    PATTERNS = {
        CT.TEMPERATURE_SENSOR: (
            r"MLX906(?:14|32)[A-Z0-9-]*",
        ),
        CT.MAGNETIC_SENSOR: (
            r"MLX9(?:0[23][0-9]{2}|1[0-9]{3})[A-Z0-9-]*",
        ),
    }


class InvenSenseHandler(ManufacturerHandler):
    key = "invensense"

    PATTERNS = {
        CT.IMU_INVENSENSE: (
            r"MPU-?[0-9]{4}[A-Z0-9-]*",
            r"ICM-?[0-9]{5}[A-Z0-9-]*",
        ),
        CT.GYROSCOPE: (
            r"ITG-?[0-9]{4}[A-Z0-9-]*",
            r"IXZ-?[0-9]{3}[A-Z0-9-]*",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        # MPU-6050 and MPU6050 are the same series
        return super().extract_series(mpn.replace("-", "", 1)) if mpn else ""


class SensirionHandler(ManufacturerHandler):
    key = "sensirion"

    PATTERNS = {
        CT.HUMIDITY_SENSOR_SENSIRION: (
            r"SHTC?[0-9]{1,2}[A-Z0-9-]*",
        ),
        CT.TEMPERATURE_SENSOR: (
            r"STS[0-9]{2}[A-Z0-9-]*",
        ),
        CT.SENSOR: (
            r"S(?:GP|CD|DP|FM|PS)[0-9]{2}[A-Z0-9-]*",
        ),
    }


class AKMHandler(ManufacturerHandler):
    key = "akm"

    PATTERNS = {
        CT.MAGNETIC_SENSOR: (
            r"AK(?:89|09)[0-9]{2,3}[A-Z0-9-]*",
        ),
        CT.ANALOG_IC: (
            r"AK4[0-9]{3}[A-Z0-9-]*",
        ),
    }
