from smartcare import cache
from smartcare.cache import QueryCache, Resource
from smartcare.models import Patient


def test_append_falls_back_to_singleton():
    query_cache = QueryCache()
    patient = Patient(id=1, name="Kim", age=70)

    query_cache.patch(Resource.PATIENTS, cache.append(patient))

    assert query_cache.get(Resource.PATIENTS) == [patient]


def test_replace_swaps_matching_id_only():
    query_cache = QueryCache()
    kim = Patient(id=1, name="Kim", age=70)
    lee = Patient(id=2, name="Lee", age=80)
    query_cache.set(Resource.PATIENTS, [kim, lee])

    updated = Patient(id=2, name="Lee", age=81)
    query_cache.patch(Resource.PATIENTS, cache.replace(updated))

    assert query_cache.get(Resource.PATIENTS) == [kim, updated]


def test_discard_without_previous_value_yields_empty_list():
    query_cache = QueryCache()

    query_cache.patch(Resource.CAMERAS, cache.discard(5))

    assert query_cache.get(Resource.CAMERAS) == []


def test_patch_stores_a_new_list():
    query_cache = QueryCache()
    original = [Patient(id=1, name="Kim", age=70)]
    query_cache.set(Resource.PATIENTS, original)

    query_cache.patch(Resource.PATIENTS, cache.append(Patient(id=2, name="Lee", age=80)))

    assert len(original) == 1
    assert len(query_cache.get(Resource.PATIENTS)) == 2


def test_fetch_loads_once_and_keys_are_independent():
    query_cache = QueryCache()
    calls = []

    def loader():
        calls.append(1)
        return ["loaded"]

    assert query_cache.fetch(Resource.ROOMS, loader) == ["loaded"]
    assert query_cache.fetch(Resource.ROOMS, loader) == ["loaded"]
    assert len(calls) == 1
    assert not query_cache.has(Resource.PATIENTS)


def test_resource_paths():
    assert Resource.PATIENTS.path == "/api/patients"
    assert Resource.ENV_LOGS.item_path(3) == "/api/env-logs/3"
