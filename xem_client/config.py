"""Configuration for XEM API client."""

import os

XEM_API_BASE_URL = os.getenv('XEM_API_BASE_URL', 'http://thexem.de/')
XEM_ALL_ENDPOINT = os.getenv('XEM_ALL_ENDPOINT', 'map/all')
XEM_NAMES_ENDPOINT = os.getenv('XEM_NAMES_ENDPOINT', 'map/allNames')
XEM_USER_AGENT = os.getenv('XEM_USER_AGENT', '')
XEM_API_TIMEOUT = float(os.getenv('XEM_API_TIMEOUT')) if os.getenv('XEM_API_TIMEOUT') else None
