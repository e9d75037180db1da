from Advisory.services.chatbot.chatbot_schemas import Language

# Keywords per topic across all supported languages, checked in this order
TOPIC_KEYWORDS = {
    "register": ["register", "rekister", "registrera", "注册", "регистр"],
    "funding": ["fund", "money", "rahoitus", "finansier", "资金", "финанс"],
    "tax": ["tax", "vero", "skatt", "税", "налог"],
    "visa": ["visa", "permit", "lupa", "tillstånd", "签证", "виза"],
}

MOCK_RESPONSES = {
    Language.english: {
        "register": "To register a company in Finland, you can use the Business Information System (YTJ). The process typically takes 1-2 weeks and costs around €380. I can help guide you through the registration process during your meeting with the advisor.",
        "funding": "There are several funding options available: Business Finland grants, ELY Centre funding, bank loans, and private investors. Your advisor can help you identify the best options for your specific business.",
        "tax": "As a business owner in Finland, you'll need to handle VAT, income tax, and potentially employer contributions. The tax rate varies depending on your business structure. Your advisor can provide detailed information.",
        "visa": "If you're not an EU citizen, you may need a residence permit for entrepreneurs. The requirements include a viable business plan and sufficient funds. We can discuss this in detail during your meeting.",
        "default": "That's a great question! I'd recommend discussing this in detail with your business advisor during your scheduled meeting. They'll have comprehensive information tailored to your specific situation.",
    },
    Language.finnish: {
        "register": "Yrityksen rekisteröinti Suomessa tapahtuu Yritys- ja yhteisötietojärjestelmän (YTJ) kautta. Prosessi kestää yleensä 1-2 viikkoa ja maksaa noin 380 €. Voin auttaa sinua rekisteröintiprosessissa tapaamisen aikana.",
        "funding": "Käytettävissä on useita rahoitusvaihtoehtoja: Business Finlandin avustukset, ELY-keskuksen rahoitus, pankkilainat ja yksityiset sijoittajat. Neuvoja voi auttaa sinua löytämään parhaat vaihtoehdot.",
        "tax": "Yrittäjänä Suomessa sinun tulee käsitellä ALV, tulovero ja mahdollisesti työnantajamaksut. Verokanta vaihtelee yritysmuodon mukaan. Neuvoja voi antaa yksityiskohtaista tietoa.",
        "visa": "Jos et ole EU-kansalainen, saatat tarvita yrittäjän oleskeluluvan. Vaatimuksiin kuuluu toimiva liiketoimintasuunnitelma ja riittävät varat. Voimme keskustella tästä yksityiskohtaisesti tapaamisen aikana.",
        "default": "Hyvä kysymys! Suosittelen keskustelemaan tästä yksityiskohtaisesti yritysneuvojasi kanssa tapaamisen aikana. Heillä on kattavaa tietoa juuri sinun tilanteeseesi.",
    },
    Language.swedish: {
        "register": "För att registrera ett företag i Finland använder du Företags- och organisationsdatasystemet (YTJ). Processen tar vanligtvis 1-2 veckor och kostar cirka 380 €. Jag kan hjälpa dig genom registreringsprocessen under ditt möte med rådgivaren.",
        "funding": "Det finns flera finansieringsalternativ tillgängliga: Business Finland-bidrag, NTM-central finansiering, banklån och privata investerare. Din rådgivare kan hjälpa dig identifiera de bästa alternativen.",
        "tax": "Som företagare i Finland måste du hantera moms, inkomstskatt och eventuellt arbetsgivaravgifter. Skattesatsen varierar beroende på din företagsstruktur. Din rådgivare kan ge detaljerad information.",
        "visa": "Om du inte är EU-medborgare kan du behöva ett uppehållstillstånd för företagare. Kraven inkluderar en fungerande affärsplan och tillräckliga medel. Vi kan diskutera detta i detalj under ditt möte.",
        "default": "Det är en bra fråga! Jag rekommenderar att diskutera detta i detalj med din företagsrådgivare under ditt schemalagda möte. De kommer att ha omfattande information anpassad till din specifika situation.",
    },
    Language.chinese: {
        "register": "在芬兰注册公司需要使用企业和组织信息系统(YTJ)。该过程通常需要1-2周，费用约为380欧元。我可以在您与顾问会面期间帮助指导您完成注册过程。",
        "funding": "有几种融资选择：Business Finland 补助金、ELY中心资助、银行贷款和私人投资者。您的顾问可以帮助您确定最适合您的选择。",
        "tax": "作为芬兰的企业主，您需要处理增值税、所得税以及可能的雇主供款。税率因您的企业结构而异。您的顾问可以提供详细信息。",
        "visa": "如果您不是欧盟公民，您可能需要企业家居留许可。要求包括可行的商业计划和足够的资金。我们可以在会面期间详细讨论。",
        "default": "这是一个很好的问题！我建议在您预定的会面期间与您的商业顾问详细讨论。他们将提供针对您具体情况的全面信息。",
    },
    Language.russian: {
        "register": "Чтобы зарегистрировать компанию в Финляндии, вы можете использовать Информационную систему предприятий (YTJ). Процесс обычно занимает 1-2 недели и стоит около 380 евро. Я могу помочь вам в процессе регистрации во время встречи с консультантом.",
        "funding": "Доступно несколько вариантов финансирования: гранты Business Finland, финансирование центра ELY, банковские кредиты и частные инвесторы. Ваш консультант поможет определить лучшие варианты.",
        "tax": "Как владелец бизнеса в Финляндии, вам нужно будет обрабатывать НДС, подоходный налог и, возможно, взносы работодателя. Налоговая ставка зависит от структуры вашего бизнеса. Ваш консультант может предоставить подробную информацию.",
        "visa": "Если вы не являетесь гражданином ЕС, вам может потребоваться вид на жительство для предпринимателей. Требования включают жизнеспособный бизнес-план и достаточные средства. Мы можем обсудить это подробно во время встречи.",
        "default": "Это отличный вопрос! Я рекомендую обсудить это подробно с вашим бизнес-консультантом во время запланированной встречи. У них будет исчерпывающая информация, адаптированная к вашей конкретной ситуации.",
    },
}


def detect_topic(message: str) -> str:
    """Detect the advisory topic based on message content"""
    message_lower = message.lower()

    for topic, keywords in TOPIC_KEYWORDS.items():
        if any(keyword in message_lower for keyword in keywords):
            return topic

    return "default"


def get_mock_response(question: str, language: Language = Language.english) -> str:
    return MOCK_RESPONSES[Language(language)][detect_topic(question)]
