"""
Highland Games Database Initialization
Creates the events, slides, heritage, registrations, users, admins and
medal_tally tables.
"""
import os
import sqlite3

from highlandgames.config import DATABASE_PATH, DEFAULT_LAT, DEFAULT_LNG


def init_db(db_path: str = DATABASE_PATH) -> None:
    """Initialize all tables in the database at db_path."""
    # Ensure data directory exists
    data_dir = os.path.dirname(db_path)
    if data_dir and not os.path.exists(data_dir):
        os.makedirs(data_dir)

    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.cursor()

        cursor.execute(f'''
            CREATE TABLE IF NOT EXISTS events (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE,
                description TEXT DEFAULT '',
                image TEXT DEFAULT '',
                event_date TEXT DEFAULT '',
                event_time TEXT DEFAULT '',
                location TEXT DEFAULT '',
                lat REAL DEFAULT {DEFAULT_LAT},
                lng REAL DEFAULT {DEFAULT_LNG}
            )
        ''')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS slides (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                subtitle TEXT DEFAULT '',
                button_text TEXT DEFAULT '',
                action TEXT DEFAULT 'Events',
                image TEXT DEFAULT ''
            )
        ''')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS heritage (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                description TEXT DEFAULT '',
                image TEXT DEFAULT ''
            )
        ''')

        # event_name deliberately has no FOREIGN KEY: rows keep the name they were submitted with
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS registrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_name TEXT NOT NULL,
                email TEXT NOT NULL,
                type TEXT DEFAULT 'individual',
                event_name TEXT NOT NULL,
                status TEXT DEFAULT 'pending',
                created_at TEXT NOT NULL
            )
        ''')
        cursor.execute('CREATE INDEX IF NOT EXISTS idx_registrations_email ON registrations (email)')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                username TEXT NOT NULL,
                email TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL
            )
        ''')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS admins (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                username TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL
            )
        ''')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS medal_tally (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                team_name TEXT NOT NULL,
                gold INTEGER DEFAULT 0,
                silver INTEGER DEFAULT 0,
                bronze INTEGER DEFAULT 0,
                total INTEGER DEFAULT 0
            )
        ''')

        conn.commit()
    finally:
        conn.close()


def seed_demo_data(db_path: str = DATABASE_PATH) -> None:
    """Insert a handful of events, slides, heritage items and tally rows if the tables are empty."""
    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.cursor()

        if cursor.execute('SELECT COUNT(*) FROM events').fetchone()[0] == 0:
            cursor.executemany('''
                INSERT INTO events (name, description, image, event_date, event_time, location, lat, lng)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ''', [
                ('Caber Toss', 'Flip a tapered pine log end over end.', '', '2025-07-12', '11:00',
                 'Main Arena', DEFAULT_LAT, DEFAULT_LNG),
                ('Hammer Throw', 'Throw a weighted hammer for distance.', '', '2025-07-12', '13:30',
                 'North Field', 55.8470, -4.4210),
                ('Tug of War', 'Eight-a-side clan contest.', '', '2025-07-13', '15:00',
                 'Main Arena', DEFAULT_LAT, DEFAULT_LNG),
            ])

        if cursor.execute('SELECT COUNT(*) FROM slides').fetchone()[0] == 0:
            cursor.executemany('''
                INSERT INTO slides (title, subtitle, button_text, action, image) VALUES (?, ?, ?, ?, ?)
            ''', [
                ('Paisley Highland Games 2025', 'Two days of heavy events, piping and dancing.',
                 'See Events', 'Events', ''),
                ('Enter the Games', 'Individual and group entries are open.', 'Register', 'Register', ''),
            ])

        if cursor.execute('SELECT COUNT(*) FROM heritage').fetchone()[0] == 0:
            cursor.execute('''
                INSERT INTO heritage (title, description, image) VALUES (?, ?, ?)
            ''', ('The Clans of Renfrewshire', 'A short history of the clans competing this year.', ''))

        if cursor.execute('SELECT COUNT(*) FROM medal_tally').fetchone()[0] == 0:
            cursor.executemany('''
                INSERT INTO medal_tally (team_name, gold, silver, bronze, total) VALUES (?, ?, ?, ?, ?)
            ''', [
                ('Clan Stewart', 3, 1, 2, 6),
                ('Clan Campbell', 2, 3, 1, 6),
                ('Clan MacDonald', 1, 2, 3, 6),
            ])

        conn.commit()
    finally:
        conn.close()


if __name__ == '__main__':
    init_db()
    print("✅ Highland Games tables initialized successfully!")
