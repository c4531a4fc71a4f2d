"""initial schema and preset catalog

Revision ID: 001
Revises:
Create Date: 2025-01-06 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


PRESET_EXERCISES = [
    {"name": "Push-ups", "category": "strength", "duration": 10, "description": "Standard push-ups, steady pace"},
    {"name": "Bodyweight Squats", "category": "strength", "duration": 10, "description": "Full-depth air squats"},
    {"name": "Plank Hold", "category": "core", "duration": 5, "description": "Forearm plank, rest as needed"},
    {"name": "Jumping Jacks", "category": "cardio", "duration": 10, "description": "Continuous jumping jacks"},
    {"name": "Burpees", "category": "cardio", "duration": 10, "description": "Full burpees with jump"},
    {"name": "Walking Lunges", "category": "strength", "duration": 15, "description": "Alternating legs"},
    {"name": "Easy Run", "category": "cardio", "duration": 30, "description": "Conversational pace"},
    {"name": "Cycling", "category": "cardio", "duration": 45, "description": "Moderate effort, road or stationary"},
    {"name": "Yoga Flow", "category": "mobility", "duration": 30, "description": "Sun salutations and standing poses"},
    {"name": "Full Body Stretch", "category": "mobility", "duration": 15, "description": "Static stretches, 30s each"},
]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.Text(), nullable=False, unique=True),
        sa.Column('email', sa.Text(), nullable=False, unique=True),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('display_name', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'profiles',
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), primary_key=True),
        sa.Column('first_name', sa.Text(), nullable=True),
        sa.Column('last_name', sa.Text(), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        sa.Column('height_cm', sa.Float(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('profile_pic_url', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'bmi_history',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('bmi', sa.Float(), nullable=False),
        sa.Column('recorded_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_bmi_history_user_recorded', 'bmi_history', ['user_id', 'recorded_at'])

    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('exercise_name', sa.Text(), nullable=True),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_workouts_user_created', 'workouts', ['user_id', 'created_at'])

    op.create_table(
        'nutrition',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('meal_type', sa.Text(), nullable=True),
        sa.Column('protein_grams', sa.Float(), nullable=True),
        sa.Column('fat_grams', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_nutrition_user_created', 'nutrition', ['user_id', 'created_at'])

    op.create_table(
        'custom_exercises',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('category', sa.Text(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_custom_exercises_user_created', 'custom_exercises', ['user_id', 'created_at'])

    preset_table = op.create_table(
        'preset_exercises',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('category', sa.Text(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.bulk_insert(preset_table, PRESET_EXERCISES)


def downgrade() -> None:
    op.drop_table('preset_exercises')
    op.drop_index('ix_custom_exercises_user_created', table_name='custom_exercises')
    op.drop_table('custom_exercises')
    op.drop_index('ix_nutrition_user_created', table_name='nutrition')
    op.drop_table('nutrition')
    op.drop_index('ix_workouts_user_created', table_name='workouts')
    op.drop_table('workouts')
    op.drop_index('ix_bmi_history_user_recorded', table_name='bmi_history')
    op.drop_table('bmi_history')
    op.drop_table('profiles')
    op.drop_table('users')
