import genanki


# Stable model ID: Anki matches notes to note types by this number, keep it constant
VOCAB_MODEL_ID = 1607392319


def build_vocab_model() -> genanki.Model:
    """Return the genanki Model for English -> target language vocabulary cards."""
    fields = [
        {"name": "Word"},
        {"name": "Transcription"},
        {"name": "Translation"},
        {"name": "Language"},
    ]

    front_template = (
        """
                    <div class="word">{{Word}}</div>
                """
    )

    back_template = (
        """
                    <div class="word">{{Word}}</div>
                    <div class="transcription">{{Transcription}}</div>
                    <hr id="answer">
                    <div class="translation">{{Translation}}</div>
                    <div class="language">{{Language}}</div>
                """
    )

    css_styles = (
        """
.card {
    background-color: #f8fafc;
    color: #0f172a;
    font-family: 'Inter', sans-serif;
    text-align: center;
    padding: 20px;
}

.word {
    color: #1a56db;
    font-size: 32px;
    font-weight: 700;
    margin-bottom: 12px;
}

.transcription {
    font-size: 22px;
    color: #475569;
}

.translation {
    font-size: 30px;
    font-weight: 700;
    margin-top: 20px;
}

.language {
    font-size: 12px;
    margin-top: 25px;
    color: #059669;
}
        """
    )

    return genanki.Model(
        VOCAB_MODEL_ID,
        "VocabMaster Word",
        fields=fields,
        templates=[
            {
                "name": "English to translation",
                "qfmt": front_template,
                "afmt": back_template,
            }
        ],
        css=css_styles,
    )
