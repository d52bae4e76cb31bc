"""Environment-based configuration settings"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Environment settings
ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

# Public base URL of the site for each environment
BASE_URLS = {
    'development': 'http://localhost:3000',
    'production': 'https://amigo-academy.onrender.com'
}

BASE_URL = os.getenv('BASE_URL') or BASE_URLS.get(ENVIRONMENT, BASE_URLS['development'])

IS_PRODUCTION = ENVIRONMENT == 'production'
DEBUG = ENVIRONMENT == 'development'
