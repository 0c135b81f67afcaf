EARTH_RADIUS_KM = 6371.0  # km
MAX_LATITUDE = 90  # degrees
MIN_LATITUDE = -90  # degrees
MAX_LONGITUDE = 180  # degrees
MIN_LONGITUDE = -180  # degrees

# WGS84 ellipsoid
WGS84_SEMI_MAJOR_AXIS = 6378137.0  # meters
WGS84_FLATTENING = 1 / 298.257223563
WGS84_ECCENTRICITY_SQUARED = WGS84_FLATTENING * (2 - WGS84_FLATTENING)

# UTM
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500000.0  # meters
UTM_FALSE_NORTHING_SOUTH = 10000000.0  # meters
UTM_ZONE_WIDTH = 6  # degrees
MIN_UTM_ZONE = 1
MAX_UTM_ZONE = 60
UTM_MIN_LATITUDE = -80  # degrees
UTM_MAX_LATITUDE = 84  # degrees
UTM_BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"  # 8 degree bands from -80, X spans 72..84

# Encoded polyline
POLYLINE_PRECISION = 5  # decimal digits
POLYLINE_CHAR_OFFSET = 63  # "?"
POLYLINE_MAX_CHAR = 126  # "~"
POLYLINE_CHUNK_BITS = 5
POLYLINE_CHUNK_MASK = 0x1F
POLYLINE_CONTINUATION_BIT = 0x20
