"""
ContextGate - hollow platform context for telecom unit tests.

## Usage

```python
from telehost.ContextGate import ComponentContextHolder
from telehost.ServiceGate import ComponentName

holder = ComponentContextHolder()
holder.add_connection_service(
    ComponentName(package_name="com.example", class_name="com.example.FakeConnectionService"),
    fake_connection_service,
)
context = holder.get_test_double()   # hand this to the code under test
```
"""

from telehost.ContextGate.context import (
    ComponentContextHolder,
    HollowContext,
    TestApplicationContext,
)
from telehost.ContextGate.stubs import (
    Configuration,
    FakeAudioManager,
    FakeContentResolver,
    FakePackageManager,
    FakeResources,
    FakeTelephonyManager,
    ResourceLookup,
    SystemService,
    SystemServiceLocator,
)

__all__ = [
    "ComponentContextHolder",
    "HollowContext",
    "TestApplicationContext",
    "Configuration",
    "FakeAudioManager",
    "FakeContentResolver",
    "FakePackageManager",
    "FakeResources",
    "FakeTelephonyManager",
    "ResourceLookup",
    "SystemService",
    "SystemServiceLocator",
]
