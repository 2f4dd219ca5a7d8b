class TDEEInputError(ValueError):
    """Base class for inputs rejected by the strict TDEE calculations."""


class InvalidWeightError(TDEEInputError):
    def __init__(self, weight_kg):
        self.weight_kg = weight_kg
        super().__init__(f"Weight must be a positive number of kg, got {weight_kg!r}.")


class InvalidBodyFatPercentageError(TDEEInputError):
    def __init__(self, body_fat_percentage):
        self.body_fat_percentage = body_fat_percentage
        super().__init__(
            f"Body fat percentage must be in [0, 100), got {body_fat_percentage!r}."
        )


class UnknownActivityLevelError(TDEEInputError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown activity level: {label!r}.")


class UnknownExerciseFrequencyError(TDEEInputError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown exercise frequency: {label!r}.")


class BodyFatExtractionError(ValueError):
    """Raised when a body-scan analysis carries no usable body-fat figure."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Could not extract a body fat percentage from {text!r}.")
