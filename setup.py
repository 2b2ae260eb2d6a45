from setuptools import find_packages, setup

# Minimal setup.py to allow pip installation in environments (like p4a) that
# default to legacy builds and need explicit python_requires.

package_list = find_packages(
  include=[
    "entrypoints",
    "entrypoints.*",
    "notification",
    "notification.*",
    "notification_channels",
    "notification_channels.*",
    "os_interfaces",
    "os_interfaces.*",
  ]
)

setup(
  name="lingoost-notifications",
  version="0.1.0",
  description="Notification channel setup for the Lingoost app on Android and Linux",
  python_requires=">=3.11",
  packages=package_list,
  py_modules=["main"],
  include_package_data=True,
  install_requires=[
    "pyyaml",
    "pydantic>=2",
    "python-dotenv",
    "platformdirs",
  ],
  extras_require={
    "android": ["pyjnius", "cython==3.0.12", "buildozer"],
    "linux": ["desktop-notifier"],
    "dev": ["pytest", "pytest-asyncio", "pytest-cov", "desktop-notifier"],
  },
  entry_points={
    "console_scripts": [
      "lingoost-app-linux=entrypoints.lingoost_app_linux:main",
      "lingoost-notify=notification.main:run",
    ],
  },
)
