import hashlib
import json
import os
import secrets
import uuid
import aiopg
import pytz
from aiopg.connection import psycopg2
from datetime import datetime, timezone, timedelta

from fixitpapa.data.default_config import DEFAULT_SERVICES, DEFAULT_TESTIMONIALS
from fixitpapa.logger import logger


POSTGRES_DB = os.environ.get("POSTGRES_DB", "")
POSTGRES_USERNAME = os.environ.get("POSTGRES_USER", "")
POSTGRES_PASSWORD = os.environ.get("POSTGRES_PASSWORD", "")
POSTGRES_HOST = os.environ.get("POSTGRES_HOST", "localhost")
POSTGRES_PORT = os.environ.get("POSTGRES_PORT", "5432")
SESSION_TIMEOUT = os.environ.get("SESSION_TIMEOUT", 60) # Minutes
AUTH_CODE_TIMEOUT = os.environ.get("AUTH_CODE_TIMEOUT", 10) # Minutes
ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "")
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "")
ADMIN_NAME = os.environ.get("ADMIN_NAME", "Administrator")

SERVICE_FIELDS = (
    "slug", "name", "short_description", "full_description", "icon", "image", "starting_price",
    "price_note", "duration", "features", "process", "faq", "related_services", "is_active", "sort_order"
)
TESTIMONIAL_FIELDS = ("name", "location", "rating", "text", "service", "date", "image", "is_featured", "is_active")
QUOTE_FIELDS = (
    "service_id", "service_name", "answers", "estimated_price", "contact_name", "contact_email", "contact_phone",
    "contact_address", "preferred_date", "notes", "status"
)
CONTACT_FIELDS = ("name", "email", "phone", "service", "message", "status")
ANALYTICS_FIELDS = ("event_type", "page_path", "service_id", "metadata", "session_id", "user_agent", "ip_address")
JSON_FIELDS = ("features", "process", "faq", "related_services", "answers", "metadata")
TESTIMONIAL_FLAGS = ("is_active", "is_featured")


def _json_values(record, allowed):
    columns = [k for k in allowed if k in record]
    values = [json.dumps(record[k]) if k in JSON_FIELDS else record[k] for k in columns]
    return columns, values


class PostgresDataLayer:
    def __init__(self):
        with open(os.path.join(os.path.dirname(__file__), "schema.json"), "r") as json_schema:
            self.schema = json.load(json_schema)
        self.pool = None

    @property
    def configured(self):
        return bool(POSTGRES_DB)

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using PBKDF2 with SHA-256"""
        salt = secrets.token_hex(16)
        pwdh = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt.encode('utf-8'), 100000)
        return f"{salt}${pwdh.hex()}"

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        """Verify a password against its hash"""
        try:
            salt, stored_hash = password_hash.split('$')
            pwdh = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt.encode('utf-8'), 100000)
            return secrets.compare_digest(pwdh.hex(), stored_hash)
        except (ValueError, AttributeError):
            return False

    def dsn(self, dbname=POSTGRES_DB, username=POSTGRES_USERNAME, password=POSTGRES_PASSWORD):
        return f"dbname={dbname} user={username} password="\
               f"{password} host={POSTGRES_HOST} port={POSTGRES_PORT}"

    async def init(self):
        if not self.configured:
            logger.warning("POSTGRES_DB is not set. Running in degraded mode without a data store")
            return

        if self.pool is None:
            self.pool = await aiopg.create_pool(self.dsn(), minsize=2, maxsize=10)
            logger.info("Database connection pool initialized")

        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SELECT tablename FROM pg_catalog.pg_tables WHERE schemaname = 'public'")
                tables = [x[0] for x in await cur.fetchall() if x]

                init = ""
                for table_name, schema_values in self.schema.items():
                    if table_name not in tables:
                        table_schema = [f'"{column}" {sql_type}' for column, sql_type in schema_values.items()]
                        init += f"CREATE TABLE {table_name} ({','.join(table_schema)});"
                        logger.info(f"Creating table {table_name}")

                if init:
                    await cur.execute(init)

        await self._initialize_default_config()

    async def close(self):
        if self.pool is not None:
            self.pool.close()
            await self.pool.wait_closed()
            self.pool = None

    # Initialization methods
    async def _initialize_default_config(self):
        """Seed static content and the first admin without overwriting existing data"""
        logger.info("Initializing default configuration...")
        await self._initialize_services()
        await self._initialize_testimonials()
        await self._initialize_admin()
        logger.info("Default configuration initialized successfully")

    async def _initialize_services(self):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SELECT COUNT(*) FROM services")
                count = (await cur.fetchone())[0]

                if count == 0:
                    logger.info(f"Inserting {len(DEFAULT_SERVICES)} default services...")
                    for service in DEFAULT_SERVICES:
                        columns, values = _json_values(service, SERVICE_FIELDS)
                        await cur.execute(
                            f"INSERT INTO services ({','.join(columns)}) VALUES ({','.join(['%s'] * len(values))})",
                            values
                        )
                else:
                    logger.info(f"Services already exist ({count} found), skipping initialization")

    async def _initialize_testimonials(self):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SELECT COUNT(*) FROM testimonials")
                count = (await cur.fetchone())[0]

                if count == 0:
                    logger.info(f"Inserting {len(DEFAULT_TESTIMONIALS)} default testimonials...")
                    for index, testimonial in enumerate(DEFAULT_TESTIMONIALS):
                        await cur.execute(
                            "INSERT INTO testimonials (name, location, rating, text, service, date, is_featured) "
                            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
                            (testimonial["name"], testimonial["location"], testimonial["rating"], testimonial["text"],
                             testimonial["service"], testimonial["date"], index < 3)
                        )
                else:
                    logger.info(f"Testimonials already exist ({count} found), skipping initialization")

    async def _initialize_admin(self):
        """Bootstrap the first allow-listed admin from the environment"""
        if not ADMIN_EMAIL:
            return

        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SELECT COUNT(*) FROM admins")
                if (await cur.fetchone())[0] > 0:
                    return

        await self.create_admin(ADMIN_EMAIL, ADMIN_NAME)
        if ADMIN_PASSWORD:
            await self.create_auth_user(ADMIN_EMAIL, ADMIN_PASSWORD)
        logger.info(f"Bootstrapped admin '{ADMIN_EMAIL}'")

    # Sessions and flash events
    async def get_event(self, cookie):
        event = None, None
        if cookie:
            async with self.pool.acquire() as conn:
                async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                    await cur.execute("SELECT id,event,type FROM events WHERE cookie = %s", (cookie,))
                    event_query = await cur.fetchone()
                    if event_query:
                        event = event_query["event"], event_query["type"]
                        await cur.execute("DELETE FROM events WHERE id = %s", (event_query["id"],))

        return event

    async def create_event(self, cookie, event, event_type):
        if cookie:
            async with self.pool.acquire() as conn:
                async with conn.cursor() as cur:
                    # Only the latest flash message is kept
                    await cur.execute("DELETE FROM events WHERE cookie = %s", (cookie,))
                    await cur.execute("INSERT INTO events(cookie,event,type) VALUES (%s, %s, %s)", (cookie, event, event_type))

    async def create_session(self, email):
        cookie = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        cutoff_time = now - timedelta(minutes=int(SESSION_TIMEOUT))

        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("DELETE FROM events WHERE cookie IN (SELECT cookie FROM session WHERE timestamp < %s)", (cutoff_time,))
                await cur.execute("DELETE FROM session WHERE timestamp < %s", (cutoff_time,))
                await cur.execute("INSERT INTO session(cookie, timestamp, email) VALUES (%s, %s, %s)", (cookie, now, email))
                logger.info("New session created")

        return cookie

    async def verify_session(self, cookie, update_ts=True):
        """Return the live session row for a cookie. Expired sessions are deleted and yield None."""
        if not cookie:
            return None

        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT * FROM session WHERE cookie = %s", (cookie,))
                session = await cur.fetchone()
                if not session:
                    return None

                cutoff_time = datetime.now(timezone.utc) - timedelta(minutes=int(SESSION_TIMEOUT))
                if pytz.UTC.localize(session["timestamp"]) > cutoff_time:
                    if update_ts:
                        await cur.execute("UPDATE session SET timestamp = %s WHERE cookie = %s", (datetime.now(timezone.utc), cookie))
                    return dict(session)

                logger.info(f"Session is expired. Removing session record for - {cookie}")
                await cur.execute("DELETE FROM session WHERE cookie = %s", (cookie,))
                return None

    async def sign_out_session(self, cookie):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("DELETE FROM session WHERE cookie = %s", (cookie,))
                await cur.execute("DELETE FROM events WHERE cookie = %s", (cookie,))

    # Authentication and the admin allow-list
    async def get_admin_by_email(self, email):
        if not email:
            return None
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT id, email, name FROM admins WHERE LOWER(email) = %s", (email.lower(),))
                return await cur.fetchone()

    async def create_admin(self, email, name=None):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    "INSERT INTO admins (email, name) VALUES (%s, %s) ON CONFLICT (email) DO UPDATE SET name = %s RETURNING id",
                    (email.lower(), name, name)
                )
                return (await cur.fetchone())[0]

    async def create_auth_user(self, email, password):
        password_hash = self.hash_password(password)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    "INSERT INTO auth_users (email, password_hash) VALUES (%s, %s) "
                    "ON CONFLICT (email) DO UPDATE SET password_hash = %s",
                    (email.lower(), password_hash, password_hash)
                )

    async def authenticate_user(self, email, password):
        """Check credentials against the auth provider's accounts. Says nothing about admin rights."""
        if not email or not password:
            return False
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT id, password_hash FROM auth_users WHERE LOWER(email) = %s", (email.lower(),))
                user = await cur.fetchone()

                if user and self.verify_password(password, user["password_hash"]):
                    await cur.execute("UPDATE auth_users SET last_login = CURRENT_TIMESTAMP WHERE id = %s", (user["id"],))
                    return True
        return False

    async def create_auth_code(self, email):
        code = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + timedelta(minutes=int(AUTH_CODE_TIMEOUT))
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("DELETE FROM auth_codes WHERE expires_at < CURRENT_TIMESTAMP")
                await cur.execute("INSERT INTO auth_codes (code, email, expires_at) VALUES (%s, %s, %s)", (code, email.lower(), expires_at))
        return code

    async def exchange_auth_code(self, code):
        """Consume a one-time code. Returns its email, or None for unknown or expired codes."""
        if not code:
            return None
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("DELETE FROM auth_codes WHERE code = %s RETURNING email, expires_at", (code,))
                row = await cur.fetchone()
        if not row or row["expires_at"] < datetime.now(timezone.utc):
            return None
        return row["email"]

    # Services CRUD operations
    async def get_services(self, active_only=True):
        query = "SELECT * FROM services"
        if active_only:
            query += " WHERE is_active = true"
        query += " ORDER BY sort_order, id"

        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute(query)
                return await cur.fetchall()

    async def get_service(self, service_id):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT * FROM services WHERE id = %s", (service_id,))
                return await cur.fetchone()

    async def get_service_by_slug(self, slug):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT * FROM services WHERE slug = %s", (slug,))
                return await cur.fetchone()

    async def create_service(self, service):
        columns, values = _json_values(service, SERVICE_FIELDS)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    f"INSERT INTO services ({','.join(columns)}) VALUES ({','.join(['%s'] * len(values))}) RETURNING id",
                    values
                )
                return (await cur.fetchone())[0]

    async def update_service(self, service_id, service):
        return await self._update_row("services", service_id, service, SERVICE_FIELDS)

    async def set_service_active(self, service_id, is_active):
        return await self._update_row("services", service_id, {"is_active": bool(is_active)}, SERVICE_FIELDS)

    async def delete_service(self, service_id):
        return await self._delete_row("services", service_id)

    # Testimonials CRUD operations
    async def get_testimonials(self, active_only=True, featured_only=False, limit=None):
        query = "SELECT * FROM testimonials"
        conditions = []
        if active_only:
            conditions.append("is_active = true")
        if featured_only:
            conditions.append("is_featured = true")
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY date DESC, id DESC"

        params = []
        if limit is not None:
            query += " LIMIT %s"
            params.append(limit)

        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute(query, params)
                return await cur.fetchall()

    async def get_testimonial(self, testimonial_id):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT * FROM testimonials WHERE id = %s", (testimonial_id,))
                return await cur.fetchone()

    async def create_testimonial(self, testimonial):
        columns, values = _json_values(testimonial, TESTIMONIAL_FIELDS)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    f"INSERT INTO testimonials ({','.join(columns)}) VALUES ({','.join(['%s'] * len(values))}) RETURNING id",
                    values
                )
                return (await cur.fetchone())[0]

    async def update_testimonial(self, testimonial_id, testimonial):
        return await self._update_row("testimonials", testimonial_id, testimonial, TESTIMONIAL_FIELDS)

    async def set_testimonial_flag(self, testimonial_id, flag, value):
        if flag not in TESTIMONIAL_FLAGS:
            raise ValueError(f"Unknown testimonial flag '{flag}'")
        return await self._update_row("testimonials", testimonial_id, {flag: bool(value)}, TESTIMONIAL_FIELDS)

    async def delete_testimonial(self, testimonial_id):
        return await self._delete_row("testimonials", testimonial_id)

    # Quote and contact submissions
    async def create_quote_submission(self, submission):
        return await self._insert_row("quote_submissions", submission, QUOTE_FIELDS)

    async def get_quote_submissions(self, limit=None):
        return await self._list_newest("quote_submissions", limit)

    async def get_quote_submission(self, submission_id):
        return await self._get_row("quote_submissions", submission_id)

    async def update_quote_submission(self, submission_id, status=None, admin_notes=None):
        return await self._update_submission("quote_submissions", submission_id, status, admin_notes)

    async def delete_quote_submission(self, submission_id):
        return await self._delete_row("quote_submissions", submission_id)

    async def create_contact_submission(self, submission):
        return await self._insert_row("contact_submissions", submission, CONTACT_FIELDS)

    async def get_contact_submissions(self, limit=None):
        return await self._list_newest("contact_submissions", limit)

    async def get_contact_submission(self, submission_id):
        return await self._get_row("contact_submissions", submission_id)

    async def update_contact_submission(self, submission_id, status=None, admin_notes=None):
        return await self._update_submission("contact_submissions", submission_id, status, admin_notes)

    async def delete_contact_submission(self, submission_id):
        return await self._delete_row("contact_submissions", submission_id)

    # Site settings, page content and legal pages
    async def get_settings(self, category):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT key, value FROM site_settings WHERE category = %s", (category,))
                return {row["key"]: row["value"] for row in await cur.fetchall()}

    async def upsert_settings(self, category, values):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                for key, value in values.items():
                    await cur.execute("""
                        INSERT INTO site_settings (key, value, category)
                        VALUES (%s, %s, %s)
                        ON CONFLICT (key)
                        DO UPDATE SET value = %s, category = %s, updated_at = CURRENT_TIMESTAMP
                    """, (key, json.dumps(value), category, json.dumps(value), category))

    async def get_page_content(self):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT page_key, content FROM page_content")
                return {row["page_key"]: row["content"] for row in await cur.fetchall()}

    async def upsert_page_content(self, page_key, content):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("""
                    INSERT INTO page_content (page_key, content)
                    VALUES (%s, %s)
                    ON CONFLICT (page_key)
                    DO UPDATE SET content = %s, updated_at = CURRENT_TIMESTAMP
                """, (page_key, json.dumps(content), json.dumps(content)))

    async def get_legal_pages(self):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT * FROM legal_pages ORDER BY page_key")
                return await cur.fetchall()

    async def get_legal_page(self, page_key):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute("SELECT * FROM legal_pages WHERE page_key = %s", (page_key,))
                return await cur.fetchone()

    async def upsert_legal_page(self, page_key, title, content):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute("""
                    INSERT INTO legal_pages (page_key, title, content)
                    VALUES (%s, %s, %s)
                    ON CONFLICT (page_key)
                    DO UPDATE SET title = %s, content = %s, last_updated = CURRENT_TIMESTAMP
                """, (page_key, title, content, title, content))

    # Analytics
    async def create_analytics_event(self, event):
        columns, values = _json_values(event, ANALYTICS_FIELDS)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    f"INSERT INTO analytics_events ({','.join(columns)}) VALUES ({','.join(['%s'] * len(values))})",
                    values
                )

    async def get_analytics_events(self, since=None, event_type=None):
        query = "SELECT * FROM analytics_events"
        conditions, params = [], []
        if since is not None:
            conditions.append("created_at >= %s")
            params.append(since)
        if event_type:
            conditions.append("event_type = %s")
            params.append(event_type)
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY created_at DESC"

        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute(query, params)
                return await cur.fetchall()

    # Shared row helpers
    async def _insert_row(self, table, record, allowed):
        columns, values = _json_values(record, allowed)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    f"INSERT INTO {table} ({','.join(columns)}) VALUES ({','.join(['%s'] * len(values))}) RETURNING id",
                    values
                )
                return (await cur.fetchone())[0]

    async def _get_row(self, table, row_id):
        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute(f"SELECT * FROM {table} WHERE id = %s", (row_id,))
                return await cur.fetchone()

    async def _list_newest(self, table, limit=None):
        query = f"SELECT * FROM {table} ORDER BY created_at DESC, id DESC"
        params = []
        if limit is not None:
            query += " LIMIT %s"
            params.append(limit)

        async with self.pool.acquire() as conn:
            async with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                await cur.execute(query, params)
                return await cur.fetchall()

    async def _update_row(self, table, row_id, record, allowed):
        columns, values = _json_values(record, allowed)
        if not columns:
            return False
        assignments = ", ".join(f"{column} = %s" for column in columns)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    f"UPDATE {table} SET {assignments}, updated_at = CURRENT_TIMESTAMP WHERE id = %s",
                    values + [row_id]
                )
                return cur.rowcount > 0

    async def _update_submission(self, table, row_id, status=None, admin_notes=None):
        record = {}
        if status is not None:
            record["status"] = status
        if admin_notes is not None:
            record["admin_notes"] = admin_notes
        return await self._update_row(table, row_id, record, ("status", "admin_notes"))

    async def _delete_row(self, table, row_id):
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(f"DELETE FROM {table} WHERE id = %s", (row_id,))
                return cur.rowcount > 0
