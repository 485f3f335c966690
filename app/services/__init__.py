from .availability_service import AvailabilityService
from .registration_service import RegistrationService
