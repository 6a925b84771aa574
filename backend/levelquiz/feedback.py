"""
Feedback composition for a finished quiz.

The deterministic template is always built first and is the canonical
answer. A rephrasing callable (normally backed by Gemini) may rewrite it,
but any failure, timeout or empty reply leaves the template untouched.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional

from .scoring import MAX_SCORE


logger = logging.getLogger(__name__)

Rephraser = Callable[[str], Awaitable[str]]

CONTACT_LINK = "https://wa.me/message/B7UCVV3XCPANK1"

STUDY_PLANS: Dict[str, str] = {
    "A1": (
        "1. Reforce o uso de artigos (der/die/das, ein), Negação (nicht, kein), Präsens de sein/haben, "
        "Ordem S‑V‑O, Ja‑Nein‑Fragen e W‑Fragen.\n"
        "2. Pratique vocabulário básico em contextos do dia a dia (saudações, apresentações).\n"
        "3. Ouvir diálogos simples (Podcast Destravando seu Alemão), shadowing de frases básicas, "
        "memorizar 20 palavras novas/semana."
    ),
    "A2": (
        "1. Domine as diferenças entre Perfekt e Präteritum em narrativas cotidianas.\n"
        "2. Casos acusativo vs. dativo, Perfekt (haben/sein + Partizip II), Verbos modais, "
        "Conjunções (und, aber, weil, dass), Imperativo.\n"
        "3. Aprofunde o uso de conectores (zuerst, dann, danach), preposições de lugar e tempo em frases complexas.\n"
        "4. Assistir séries infantis em alemão, role‑plays (comprar, combinar horários), "
        "mapas mentais de verbos e 10 expressões/dia."
    ),
    "B1": (
        "1. Trabalhe Konjunktiv II para hipóteses e pedidos polidos.\n"
        "2. Pratique orações subordinadas com „weil\", „obwohl\" e „als ob\".\n"
        "3. Pronomes relativos, Präteritum de sein/haben/gehen, Declinação de adjetivos.\n"
        "4. Ouvir podcasts \"Slow German\", gravar áudios descrevendo o dia, anotar e usar 5 collocations/dia."
    ),
    "B2": (
        "1. Aplique Voz passiva e Modalpassiv, Partizipialkonstruktionen, Genitivo (wegen, trotz, während), "
        "Conjunções correlativas, Inversões estilísticas.\n"
        "2. Expanda seu repertório com textos literários ou técnicos, participar de debates ou "
        "mini‑apresentações de 5 min, aprender 10 sinônimos/semana."
    ),
}

FEEDBACK_TEMPLATE = """Você acertou {score} de {total} e seu nível estimado é **{level}**. Parabéns pelo resultado!

Para consolidar o que você já sabe e destravar de vez sua fala em alemão, aqui vão suas próximas etapas de estudo para o nível **{level}**:

{study_plan}

Quer ir além com material completo, cronograma claro e acompanhamento diário no seu aprendizado? Entre no meu WhatsApp e garante uma condição especial para o Curso Completo de Alemão da Ovídio Academy:
{contact_link}

—
Estou te aguardando lá para te ajudar a alcançar fluência com metodologia acelerada e acompanhamento personalizado! 🎯🇩🇪"""


def build_feedback_template(score: int, level: str) -> str:
    return FEEDBACK_TEMPLATE.format(
        score=score,
        total=MAX_SCORE,
        level=level,
        study_plan=STUDY_PLANS[level],
        contact_link=CONTACT_LINK,
    )


def build_rephrase_prompt(template: str) -> str:
    return (
        "Baseado no seguinte template de feedback, gere uma versão personalizada e motivadora em português brasileiro:\n\n"
        f"{template}\n\n"
        "Mantenha a estrutura, mas torne o texto mais natural e envolvente, "
        "mantendo todas as informações técnicas, números e links."
    )


async def compose_feedback(
    score: int,
    level: str,
    rephrase: Optional[Rephraser] = None,
    *,
    timeout: float = 15.0,
) -> str:
    template = build_feedback_template(score, level)
    if rephrase is None:
        return template
    try:
        text = await asyncio.wait_for(rephrase(build_rephrase_prompt(template)), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("feedback rephrasing timed out after %.1fs, using template", timeout)
        return template
    except Exception as e:
        logger.warning("feedback rephrasing failed, using template: %s", e)
        return template
    if not isinstance(text, str) or not text.strip():
        logger.warning("feedback rephrasing returned no text, using template")
        return template
    return text.strip()
