from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List


# The web client speaks camelCase (request bodies, profile, login and
# progress payloads); stored rows go back out with their column names.
class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Auth ---

class UserRegister(CamelModel):
    """Required fields are checked in the handler so a gap is a 400, not a 422."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")


class UserLogin(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    id: int
    username: str
    email: str
    display_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class RegisterResponse(BaseModel):
    success: bool = True
    user: UserPublic


class LoginResponse(CamelModel):
    token: str
    username: str
    display_name: Optional[str] = Field(default=None, alias="displayName")


# --- Profile ---

class ProfileUpdate(CamelModel):
    """Any subset; null and absent both mean 'keep the stored value'."""
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    age: Optional[int] = None
    weight_kg: Optional[float] = Field(default=None, alias="weightKg")
    height_cm: Optional[float] = Field(default=None, alias="heightCm")
    bio: Optional[str] = None
    profile_pic_url: Optional[str] = Field(default=None, alias="profilePicUrl")


class ProfileResponse(CamelModel):
    id: int
    username: str
    email: str
    display_name: Optional[str] = Field(default=None, alias="displayName")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    age: Optional[int] = None
    weight_kg: Optional[float] = Field(default=None, alias="weightKg")
    height_cm: Optional[float] = Field(default=None, alias="heightCm")
    bio: Optional[str] = None
    profile_pic_url: Optional[str] = Field(default=None, alias="profilePicUrl")


class SuccessResponse(BaseModel):
    success: bool = True


class BmiHistoryResponse(BaseModel):
    id: int
    bmi: float
    recorded_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Workouts ---

class WorkoutCreate(CamelModel):
    exercise_name: Optional[str] = Field(default=None, alias="exerciseName")
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight_kg: Optional[float] = Field(default=None, alias="weightKg")


class WorkoutResponse(BaseModel):
    id: int
    user_id: int
    exercise_name: Optional[str]
    sets: Optional[int]
    reps: Optional[int]
    weight_kg: Optional[float]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Nutrition ---

class NutritionEntryCreate(CamelModel):
    name: Optional[str] = None
    meal_type: Optional[str] = Field(default=None, alias="mealType")
    protein_grams: Optional[float] = Field(default=None, alias="proteinGrams")
    fat_grams: Optional[float] = Field(default=None, alias="fatGrams")


class NutritionEntryResponse(BaseModel):
    id: int
    user_id: int
    name: Optional[str]
    meal_type: Optional[str]
    protein_grams: Optional[float]
    fat_grams: Optional[float]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Custom exercises ---

class CustomExerciseCreate(CamelModel):
    name: Optional[str] = None
    category: Optional[str] = None
    duration: Optional[int] = None
    notes: Optional[str] = None


class CustomExerciseResponse(BaseModel):
    id: int
    user_id: int
    name: Optional[str]
    category: Optional[str]
    duration: Optional[int]
    notes: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Presets ---

class PresetExerciseResponse(BaseModel):
    id: int
    name: str
    category: Optional[str] = None
    duration: Optional[int] = None
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PresetComplete(CamelModel):
    preset_id: Optional[int] = Field(default=None, alias="presetId")


class PresetCompleteResponse(BaseModel):
    success: bool = True
    workout: WorkoutResponse


# --- Progress ---

class WeeklyProgressResponse(CamelModel):
    labels: List[str]
    calories: List[float]
    workout_minutes: List[int] = Field(alias="workoutMinutes")
    total_calories: float = Field(alias="totalCalories")
    total_steps: int = Field(default=0, alias="totalSteps")
    weekly_goal: int = Field(alias="weeklyGoal")
