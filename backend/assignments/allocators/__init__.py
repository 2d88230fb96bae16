from .base import AllocationResult, CourseRequest, ManualRequest
from .extension import ExtensionAllocator
from .preference_score import PreferenceScoreAllocator
from .regular import CommonCourseAllocator, ManualAllocator
from .summer import SummerAllocator
