import os

TEST_DIR = os.path.join(os.path.abspath(os.path.dirname(__file__)), 'tests')

INSTALLED_APPS = [
    'cleancss_filter',
]

DATABASES = {}

SECRET_KEY = "iufoj=mibkpdz*%bob952x(%49rqgv8gg45k36kjcg76&-y5=!"

USE_TZ = True
