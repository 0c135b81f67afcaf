class BaseError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidLatitudeError(BaseError):
    def __init__(self, message: str = "The latitude must be between -90 and 90."):
        super().__init__(message)


class InvalidLongitudeError(BaseError):
    def __init__(self, message: str = "The longitude must be between -180 and 180."):
        super().__init__(message)


class InvalidUTMZoneError(BaseError):
    def __init__(self, message: str = "The UTM zone must be between 1 and 60."):
        super().__init__(message)


class InvalidHemisphereError(BaseError):
    def __init__(self, message: str = "The hemisphere must be 'N' or 'S'."):
        super().__init__(message)


class MixedUTMZoneError(BaseError):
    def __init__(
        self,
        message: str = "UTM locations from different zones or hemispheres cannot be combined.",
    ):
        super().__init__(message)


class InvalidPolylineError(BaseError):
    def __init__(
        self, message: str = "The encoded polyline is malformed.", index: int = None
    ):
        self.index = index
        if index is not None:
            message = f"{message} (at character {index})"
        super().__init__(message)


class InvalidRouteFileError(BaseError):
    def __init__(
        self,
        message: str = "A route file must define either 'polyline' or 'coordinates'.",
    ):
        super().__init__(message)
