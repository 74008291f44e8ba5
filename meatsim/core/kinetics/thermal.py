from meatsim.core.constants import DT_HOURS

K_COOL = 0.3  # 1/h, product-to-air heat exchange


def temperature_rate(product_temp: float, env_temp: float) -> float:
    """
    Newton cooling of the product towards the surrounding air.

    Returns:
        dT/dt in °C per hour.
    """
    return -K_COOL * (product_temp - env_temp)


def relax_temperature(product_temp: float, env_temp: float, dt: float = DT_HOURS) -> float:
    return product_temp + temperature_rate(product_temp, env_temp) * dt
