DDL = """
CREATE TABLE IF NOT EXISTS admin_users (
  id SERIAL PRIMARY KEY,
  username VARCHAR(50) NOT NULL UNIQUE,
  password_hash VARCHAR(255) NOT NULL,
  created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
  last_login TIMESTAMPTZ
);

CREATE TABLE IF NOT EXISTS quiz_sets (
  id SERIAL PRIMARY KEY,
  quiz_name VARCHAR(200) NOT NULL,

  quiz_1_id VARCHAR(100) NOT NULL UNIQUE,
  quiz_2_id VARCHAR(100) NOT NULL UNIQUE,
  quiz_3_id VARCHAR(100) NOT NULL UNIQUE,
  result_id VARCHAR(100) NOT NULL UNIQUE,

  question_1_text TEXT NOT NULL,
  question_1_placeholder VARCHAR(255),
  question_1_answer TEXT,
  question_2_text TEXT NOT NULL,
  question_2_placeholder VARCHAR(255),
  question_2_answer TEXT,
  question_3_text TEXT NOT NULL,
  question_3_placeholder VARCHAR(255),
  question_3_answer TEXT,

  result_message TEXT NOT NULL,
  reward_link VARCHAR(500) NOT NULL,

  timer_duration INT NOT NULL DEFAULT 30,
  require_answer BOOLEAN NOT NULL DEFAULT FALSE,
  is_active BOOLEAN NOT NULL DEFAULT TRUE,

  created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
  updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS ix_quiz_sets_is_active ON quiz_sets(is_active);
CREATE INDEX IF NOT EXISTS ix_quiz_sets_created_at ON quiz_sets(created_at DESC);
"""
