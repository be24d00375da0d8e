"""
Test fixtures shared across all VibeGuard tests.
"""

import pytest

from vibeguard.core.catalog import DEFAULT_CATALOG
from vibeguard.core.rule_engine import RuleEngine


VULNERABLE_JS = '''// AI-Generated JavaScript – Deliberately Vulnerable
const password = "admin123";
const apiKey = "sk-proj-abc123secretkey456";
const userId = req.params.id;

// SQL Injection
const query = "SELECT * FROM users WHERE id=" + userId;
db.execute(query);

// XSS vulnerability
document.getElementById("output").innerHTML = userInput;

// Dangerous eval
eval(userInput);

// Insecure random for token
const token = Math.random().toString(36);

// External HTTP (not HTTPS)
fetch("http://api.example.com/data");

// Debug logs with sensitive data
console.log("User data:", userData);
console.log("Token:", token);

// TODO: add proper authentication
// FIXME: this loop might be infinite
let i = 0;
while (true) {
  if (someCondition) break;
  i++;
}'''


VULNERABLE_PY = '''# AI-Generated Python – Deliberately Vulnerable
import pickle
import os
import hashlib

DEBUG = True
password = "supersecret123"
api_key = "sk-abc123xyz"

# Shell injection
user_input = input("Enter filename: ")
os.system("cat " + user_input)

# Pickle deserialization from untrusted source
data = pickle.loads(user_data_from_network)

# Weak hashing
hashed = hashlib.md5(password.encode()).hexdigest()

# SQL injection
query = "SELECT * FROM users WHERE name='" + username + "'"
cursor.execute(query)

# HTTP instead of HTTPS
import urllib.request
urllib.request.urlopen("http://api.example.com/endpoint")

# Broad exception catch
try:
    risky_operation()
except:
    pass

# FIXME: need to validate input here
# TODO: add rate limiting'''


CLEAN_JS = '''// Clean, Secure JavaScript Example
import { randomBytes } from 'crypto';
import { hash } from 'bcrypt';

// Environment variables for secrets
const apiKey = process.env.API_KEY;
const dbPassword = process.env.DB_PASSWORD;

// Parameterized query – no SQL injection
async function getUserById(userId) {
  const result = await db.query(
    'SELECT id, name, email FROM users WHERE id = $1',
    [userId]
  );
  return result.rows[0] ?? null;
}

// Sanitized output – no XSS
function displayMessage(message) {
  const el = document.getElementById('output');
  el.textContent = message; // Safe: textContent not innerHTML
}

// Cryptographically secure token generation
function generateToken() {
  return randomBytes(32).toString('hex');
}

// Proper password hashing
async function hashPassword(plaintext) {
  return hash(plaintext, 12); // bcrypt with cost factor 12
}

// HTTPS endpoint
const ENDPOINT = 'https://api.example.com/data';

export { getUserById, displayMessage, generateToken, hashPassword };'''


@pytest.fixture
def vulnerable_js():
    """Sample JavaScript with known vulnerabilities."""
    return VULNERABLE_JS


@pytest.fixture
def vulnerable_py():
    """Sample Python with known vulnerabilities."""
    return VULNERABLE_PY


@pytest.fixture
def clean_js():
    """Clean JavaScript with no findings."""
    return CLEAN_JS


@pytest.fixture
def engine():
    return RuleEngine(DEFAULT_CATALOG)
