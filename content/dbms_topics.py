# dbms_topics.py
# Database Management Systems topics

ACID_PROPERTIES = {
    'id': 'acid-properties',
    'title': 'ACID Properties',
    'subtitle': 'Guarantees of Reliable Transactions',
    'summary': 'Atomicity, Consistency, Isolation and Durability together guarantee that database transactions are processed reliably.',
    'analogy': 'A bank transfer either moves the money completely or not at all, never leaving it half way.',
    'explanation': """The Four Properties:
- Atomicity: all operations of a transaction succeed or none do
- Consistency: a transaction moves the database between valid states
- Isolation: concurrent transactions do not see each other's partial work
- Durability: committed changes survive crashes

How databases implement them:
Write-ahead logging provides atomicity and durability, while locking or MVCC provides isolation.""",
    'key_points': [
        'Atomicity is implemented with undo logs',
        'Durability is implemented with redo logs and fsync',
        'Isolation levels trade consistency for concurrency',
    ],
    'questions': [
        {'question': 'Which component ensures durability?', 'answer': 'The recovery manager, using the write-ahead log flushed to stable storage before commit is acknowledged.'},
    ],
}

NORMALIZATION = {
    'id': 'normalization',
    'title': 'Normalization',
    'subtitle': 'Removing Redundancy Through Normal Forms',
    'summary': 'Normalization organizes tables to reduce redundancy and update anomalies, progressing through 1NF, 2NF, 3NF and BCNF.',
    'key_points': [
        '1NF: atomic values, no repeating groups',
        '2NF: no partial dependency on a composite key',
        '3NF: no transitive dependency on the key',
        'BCNF: every determinant is a candidate key',
    ],
    'code_examples': [
        {
            'title': 'Splitting a transitive dependency',
            'language': 'sql',
            'code': """-- employee(emp_id, dept_id, dept_name) has emp_id -> dept_id -> dept_name
CREATE TABLE department (dept_id INT PRIMARY KEY, dept_name VARCHAR(100));
CREATE TABLE employee (emp_id INT PRIMARY KEY, dept_id INT REFERENCES department(dept_id));""",
        },
    ],
}

ISOLATION_LEVELS = {
    'id': 'isolation-levels',
    'title': 'Isolation Levels',
    'subtitle': 'Read Uncommitted to Serializable',
    'summary': 'SQL isolation levels define which concurrency anomalies (dirty reads, non-repeatable reads, phantoms) a transaction may observe.',
    'key_points': [
        'Read Uncommitted allows dirty reads',
        'Read Committed prevents dirty reads',
        'Repeatable Read prevents non-repeatable reads',
        'Serializable prevents phantoms',
    ],
}

HASH_INDEX = {
    'id': 'hash-index',
    'title': 'Hash Index',
    'subtitle': 'Constant-Time Equality Lookups',
    'summary': 'A hash index maps keys to buckets with a hash function, giving fast equality lookups but no support for range queries.',
    'key_points': [
        'O(1) average equality lookup',
        'Cannot serve range or ordering queries',
        'Collisions handled by chaining or open addressing',
    ],
}

FUNDAMENTALS = [ACID_PROPERTIES, NORMALIZATION]
TRANSACTIONS = [ISOLATION_LEVELS]
INDEXING = [HASH_INDEX]
