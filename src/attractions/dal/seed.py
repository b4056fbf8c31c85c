"""Fixed sample dataset loaded into new attraction stores."""

from typing import Tuple

from attractions.models.attraction import Attraction

SEED_ATTRACTIONS: Tuple[Attraction, ...] = (
    Attraction.create('Tivoli', 'København', 'Forlystelsespark i hjertet af København.',
                      ['forlystelser', 'familie', 'kultur']),
    Attraction.create('Nyhavn', 'København', 'Farverig havnepromenade med restauranter og barer.',
                      ['havn', 'restauranter', 'historie']),
    Attraction.create('Den Lille Havfrue', 'København', 'Berømt statue inspireret af H.C. Andersen.',
                      ['statue', 'kultur', 'historie']),
    Attraction.create('ARoS', 'Aarhus', 'Kunstmuseum i Aarhus med regnbuepanorama.',
                      ['kunst', 'museum', 'arkitektur']),
    Attraction.create('Egeskov Slot', 'Kværndrup', 'Renæssanceslot på Fyn omgivet af voldgrav.',
                      ['slot', 'historie', 'have']),
    Attraction.create('Aalborg Zoo', 'Aalborg', 'Dyrepark med mere end 100 forskellige arter.',
                      ['dyr', 'familie', 'natur']),
    Attraction.create('Moesgaard Museum', 'Aarhus', 'Museum i Aarhus med arkæologi og kulturhistorie.',
                      ['museum', 'historie', 'arkæologi']),
    Attraction.create('Kronborg Slot', 'Helsingør', 'Renæssanceslot i Helsingør, kendt fra Shakespeares Hamlet.',
                      ['slot', 'kultur', 'historie']),
    Attraction.create('Odense Zoo', 'Odense', 'Familievenlig zoologisk have på Fyn.',
                      ['dyr', 'familie', 'natur']),
    Attraction.create('Hammershus', 'Bornholm', 'Nordeuropas største borgruin på Bornholm.',
                      ['ruin', 'historie', 'arkitektur']),
    Attraction.create('Grenen', 'Skagen', 'Danmarks nordligste punkt, hvor to have mødes.',
                      ['natur', 'strand', 'geografi']),
    Attraction.create('Legoland', 'Billund', 'Forlystelsespark i Billund bygget af LEGO-klodser.',
                      ['forlystelser', 'familie', 'leg']),
)
