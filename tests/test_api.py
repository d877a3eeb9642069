def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc123"})
    assert response.headers["X-Correlation-ID"] == "abc123"


def test_languages(client):
    languages = client.get("/api/languages/").json()
    assert {"code": "ru", "name": "Russian", "nativeName": "Русский"} in languages

    assert client.get("/api/languages/ru").json()["nativeName"] == "Русский"


def test_unknown_language_is_404(client):
    response = client.get("/api/languages/xx")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "E4010_NOT_FOUND"


def test_grammar(client):
    grammar = client.get("/api/languages/ru/grammar").json()
    assert [c["id"] for c in grammar["cases"]] == [
        "nominative", "genitive", "dative", "accusative", "instrumental", "locative",
    ]
    assert grammar["hasDeclension"] is True
    supported = {d["id"] for d in grammar["declensions"] if d["supported"]}
    assert supported == {"T0", "T1", "T2", "T3"}


def test_declension_patterns(client):
    patterns = client.get("/api/languages/ru/declension-patterns").json()["patterns"]
    assert patterns["T1_masculine"]["endings"]["genitive"]["plural"] == "ов"


def test_decline_adjective(client):
    response = client.post("/api/morphology/adjective", json={
        "text": "красивый", "gender": "masculine", "animacy": "inanimate", "case": "genitive", "number": "singular",
    })
    assert response.status_code == 200
    assert response.json() == {"form": "красивого", "declension": "hard_y"}


def test_decline_adjective_accepts_aliases(client):
    response = client.post("/api/morphology/adjective", json={
        "text": "синий", "gender": "n", "case": "prepositional", "number": "sg",
    })
    assert response.json()["form"] == "синем"


def test_unclassifiable_adjective_is_400(client):
    response = client.post("/api/morphology/adjective", json={
        "text": "ый", "gender": "feminine", "case": "nominative",
    })
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "E2030_CLASSIFICATION_FAILED"
    assert error["metadata"]["value"] == "ый"


def test_decline_noun(client):
    response = client.post("/api/morphology/noun", json={
        "base": "сон", "gender": "masculine", "animacy": "inanimate", "declension": "T1",
        "fluent_vowel": "о", "case": "genitive", "number": "singular",
    })
    assert response.status_code == 200
    assert response.json()["form"] == "сна"


def test_decline_noun_with_plural_override(client):
    response = client.post("/api/morphology/noun", json={
        "base": "дом", "gender": "masculine", "animacy": "inanimate", "declension": "T1",
        "plural": "а", "case": "nominative", "number": "plural",
    })
    assert response.json()["form"] == "дома"


def test_unsupported_declension_is_422(client):
    response = client.post("/api/morphology/noun", json={
        "base": "нож", "gender": "masculine", "animacy": "inanimate", "declension": "T4",
        "case": "dative", "number": "singular",
    })
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "E5030_UNSUPPORTED_DECLENSION"


def test_malformed_request_is_400(client):
    response = client.post("/api/morphology/noun", json={
        "base": "край", "gender": "masculine", "animacy": "inanimate", "declension": "T6",
        "case": "dative",
    })
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "E2000_VALIDATION_GENERIC"
    assert error["metadata"]["details"]


def test_noun_paradigm(client):
    response = client.get("/api/morphology/nouns/тюлень/paradigm")
    assert response.status_code == 200
    body = response.json()
    assert body["lemma"] == "тюлень"
    assert len(body["cells"]) == 12
    assert body["cells"][2] == {"case": "genitive", "number": "singular", "form": "тюленя", "gender": None}


def test_noun_paradigm_unknown_noun(client):
    assert client.get("/api/morphology/nouns/нетслова/paradigm").status_code == 404


def test_adjective_paradigm(client):
    response = client.get("/api/morphology/adjectives/синий/paradigm", params={"animacy": "animate"})
    cells = response.json()["cells"]
    assert len(cells) == 24
    plural_accusative = next(c for c in cells if c["number"] == "plural" and c["case"] == "accusative")
    assert plural_accusative["form"] == "синих"


def test_adjective_paradigm_unclassifiable(client):
    assert client.get("/api/morphology/adjectives/ой/paradigm").status_code == 400


def test_lexicon(client, lexicon):
    body = client.get("/api/lexicon/").json()
    assert len(body["objects"]) == len(lexicon.objects)
    assert list(body["adjectives"]) == ["oddity", "size", "shape", "feel", "color", "material"]
    son = next(o for o in body["objects"] if o["base"] == "сон")
    assert son["fluent_vowel"] == "о" and son["plural"] is None

    summary = client.get("/api/lexicon/summary").json()
    assert summary["objects"] == len(lexicon.objects)


def test_oddity_is_reproducible_with_seed(client):
    first = client.get("/api/oddity/", params={"seed": 7}).json()
    second = client.get("/api/oddity/", params={"seed": 7}).json()
    assert first == second
    assert first["seed"] == 7
    assert first["kind"] in ("noun", "with")
    assert first["text"].endswith(".")


def test_oddity_without_seed(client):
    response = client.get("/api/oddity/")
    assert response.status_code == 200
    assert response.json()["seed"] is None


def test_short_noun_base_is_400(client):
    response = client.post("/api/morphology/noun", json={
        "base": "ёж", "gender": "masculine", "animacy": "animate", "declension": "T1",
        "case": "genitive", "number": "singular",
    })
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "E2000_VALIDATION_GENERIC"
    assert error["metadata"]["details"][0]["field"] == "base"
