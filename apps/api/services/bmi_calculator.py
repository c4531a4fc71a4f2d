"""
BMI Calculation Service

BMI = weight_kg / (height_m)²

Recorded to bmi_history whenever a profile update leaves both weight and
height populated.
"""
from typing import Optional


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """
    Calculate BMI from weight (kg) and height (cm).

    Formula: BMI = weight_kg / (height_m)²
    where height_m = height_cm / 100

    Args:
        weight_kg: Weight in kilograms
        height_cm: Height in centimeters

    Returns:
        BMI value (unrounded) or None if either input is missing or not positive

    Examples:
        >>> round(calculate_bmi(70, 175), 2)
        22.86
        >>> calculate_bmi(70, None) is None
        True
    """
    if weight_kg is None or height_cm is None:
        return None

    if weight_kg <= 0 or height_cm <= 0:
        return None

    height_m = float(height_cm) / 100.0
    return float(weight_kg) / (height_m ** 2)
