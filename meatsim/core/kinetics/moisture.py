from meatsim.core.constants import DT_HOURS

K_DRY = 0.005  # 1/h for fully open packaging


def moisture_rate(moisture: float, humidity: float, packaging_factor: float) -> float:
    """
    Moisture loss rate in % per hour.

    Driving force is moisture - humidity / 2; no moisture gain is modelled,
    so a non-positive driving force gives exactly zero.
    """
    driving_force = moisture - humidity / 2
    if driving_force <= 0:
        return 0.0
    k_dry = K_DRY * packaging_factor
    return -k_dry * driving_force


def dry_moisture(
    moisture: float, humidity: float, packaging_factor: float, dt: float = DT_HOURS
) -> float:
    return moisture + moisture_rate(moisture, humidity, packaging_factor) * dt
