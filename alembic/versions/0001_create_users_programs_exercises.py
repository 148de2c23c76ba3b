"""create_users_programs_exercises

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            username TEXT NOT NULL UNIQUE CHECK (char_length(username) > 0),
            password_hash TEXT NOT NULL,
            access_token TEXT NOT NULL UNIQUE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );

        CREATE TABLE IF NOT EXISTS programs (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            program_type VARCHAR(10) NOT NULL CHECK (program_type IN ('weights', 'cardio')),
            program_name VARCHAR(20) NOT NULL UNIQUE
                CHECK (char_length(program_name) BETWEEN 5 AND 20),
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );

        CREATE TABLE IF NOT EXISTS exercises (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            exercise_name VARCHAR(20) NOT NULL
                CHECK (char_length(exercise_name) BETWEEN 5 AND 20),
            metrics VARCHAR(10) NOT NULL CHECK (metrics IN ('set', 'reps', 'weights'))
        );

        -- Ordered reference lists; the serial id gives insertion order.
        CREATE TABLE IF NOT EXISTS user_programs (
            id BIGSERIAL PRIMARY KEY,
            user_id UUID NOT NULL REFERENCES users(id),
            program_id UUID NOT NULL UNIQUE REFERENCES programs(id)
        );
        CREATE INDEX IF NOT EXISTS idx_user_programs_user_id ON user_programs(user_id);

        CREATE TABLE IF NOT EXISTS program_exercises (
            id BIGSERIAL PRIMARY KEY,
            program_id UUID NOT NULL REFERENCES programs(id),
            exercise_id UUID NOT NULL REFERENCES exercises(id)
        );
        CREATE INDEX IF NOT EXISTS idx_program_exercises_program_id
            ON program_exercises(program_id);

        -- access_token and created_at are fixed once written.
        CREATE OR REPLACE FUNCTION reject_access_token_update()
        RETURNS TRIGGER AS $$
        BEGIN
            IF NEW.access_token IS DISTINCT FROM OLD.access_token THEN
                RAISE EXCEPTION 'users.access_token is immutable';
            END IF;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;

        DROP TRIGGER IF EXISTS users_access_token_immutable ON users;
        CREATE TRIGGER users_access_token_immutable
            BEFORE UPDATE ON users
            FOR EACH ROW
            EXECUTE FUNCTION reject_access_token_update();

        CREATE OR REPLACE FUNCTION reject_program_created_at_update()
        RETURNS TRIGGER AS $$
        BEGIN
            IF NEW.created_at IS DISTINCT FROM OLD.created_at THEN
                RAISE EXCEPTION 'programs.created_at is immutable';
            END IF;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;

        DROP TRIGGER IF EXISTS programs_created_at_immutable ON programs;
        CREATE TRIGGER programs_created_at_immutable
            BEFORE UPDATE ON programs
            FOR EACH ROW
            EXECUTE FUNCTION reject_program_created_at_update();
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("""
        DROP TRIGGER IF EXISTS programs_created_at_immutable ON programs;
        DROP FUNCTION IF EXISTS reject_program_created_at_update();
        DROP TRIGGER IF EXISTS users_access_token_immutable ON users;
        DROP FUNCTION IF EXISTS reject_access_token_update();
        DROP TABLE IF EXISTS program_exercises;
        DROP TABLE IF EXISTS user_programs;
        DROP TABLE IF EXISTS exercises;
        DROP TABLE IF EXISTS programs;
        DROP TABLE IF EXISTS users;
    """)
