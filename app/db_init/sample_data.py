# sample_data.py
# Sample flights for loading into the database

SAMPLE_FLIGHTS = [
    # Pune -> Mumbai, 5 Sep 2020
    {
        'airlines': 'Air India',
        'name': 'AI4131',
        'from': 'PNQ',
        'to': 'BOM',
        'date': '2020-09-05',
        'fare': 4000
    },
    {
        'airlines': 'IndiGo',
        'name': '6E5372',
        'from': 'PNQ',
        'to': 'BOM',
        'date': '2020-09-05T18:40:00Z',
        'fare': 3250
    },
    {
        'airlines': 'Vistara',
        'name': 'UK0982',
        'from': 'PNQ',
        'to': 'BOM',
        'date': '2020-09-06T07:15:00Z',
        'fare': 4780
    },

    # Mumbai -> Delhi
    {
        'airlines': 'Air India',
        'name': 'AI0805',
        'from': 'BOM',
        'to': 'DEL',
        'date': '2020-09-05T09:00:00Z',
        'fare': 5600
    },
    {
        'airlines': 'SpiceJet',
        'name': 'SG8169',
        'from': 'BOM',
        'to': 'DEL',
        'date': '2020-09-07T21:30:00Z',
        'fare': 4120.5
    },

    # Delhi -> Bengaluru
    {
        'airlines': 'IndiGo',
        'name': '6E2131',
        'from': 'DEL',
        'to': 'BLR',
        'date': '2020-09-08T05:55:00Z',
        'fare': 6350
    },
    {
        'airlines': 'Vistara',
        'name': 'UK0817',
        'from': 'DEL',
        'to': 'BLR',
        'date': '2020-09-08T16:20:00Z',
        'fare': 7199
    },

    # Bengaluru -> Pune
    {
        'airlines': 'Air India',
        'name': 'AI0651',
        'from': 'BLR',
        'to': 'PNQ',
        'date': '2020-09-10T11:10:00Z',
        'fare': 3899
    },
]
